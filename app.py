from pathlib import Path

import pandas as pd
import streamlit as st

# Import internal modules
try:
    from src.balance import count_letters
    from src.scanner import ScanResult, scan_texts
except ImportError:
    st.error("Balance module not found. Run from the project root: `streamlit run app.py`")
    st.stop()

# --- 1. Page Configuration ---
st.set_page_config(
    page_title="PY-Balance",
    layout="wide",
    initial_sidebar_state="expanded",
)

# --- 2. Session State Initialization ---
if "scan_results" not in st.session_state:
    st.session_state.scan_results = None
if "scanned_path" not in st.session_state:
    st.session_state.scanned_path = None

# --- 3. Sidebar: Configuration ---
with st.sidebar:
    st.title("PY-Balance")
    st.caption("Do 'p' and 'y' appear equally often?")
    st.markdown("---")

    project_path = st.text_input("Text Directory:", value=str(Path.cwd()))
    scan_btn = st.button("Scan Directory", type="primary")
    status_placeholder = st.empty()

# Invalidate stale results when the user changes the target path
if st.session_state.scanned_path and st.session_state.scanned_path != project_path:
    st.session_state.scan_results = None
    st.session_state.scanned_path = None


# --- 4. Core Controller ---

def run_scan() -> ScanResult | None:
    """Scan the chosen directory and store results in session state."""
    root = Path(project_path)
    if not root.is_dir():
        status_placeholder.error("Path not found or is not a directory.")
        return None

    st.session_state.scan_results = None
    st.session_state.scanned_path = None

    with st.spinner("Checking text files..."):
        try:
            results = scan_texts(root)
            st.session_state.scan_results = results
            st.session_state.scanned_path = project_path
            status_placeholder.success("Scan complete.")
            return results
        except Exception as e:
            st.warning(f"Scanner error: {e}")
            return None


if scan_btn:
    run_scan()


# --- 5. Quick Check ---

st.header("Quick Check")
raw = st.text_area("One string per line:", value="pPoooyY\nPyy")
rows = []
for text in raw.splitlines():
    count = count_letters(text)
    rows.append({"Text": text, "p": count.p, "y": count.y, "Balanced": count.balanced})
if rows:
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


# --- 6. Directory View ---

if st.session_state.scan_results:
    res = st.session_state.scan_results
    unbalanced = res.unbalanced_lines

    st.header(f"Directory: {Path(project_path).name}")

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Files Scanned", res.files_scanned)
    m2.metric("Lines Checked", len(res.lines))
    m3.metric("Balanced", len(res.lines) - len(unbalanced))
    m4.metric("Unbalanced", len(unbalanced), delta=-len(unbalanced), delta_color="inverse")

    st.markdown("---")

    if not res.lines:
        st.info("No lines found in .txt files under this directory.")
    else:
        data = []
        for line in res.lines:
            data.append({
                "File": str(line.file_path).replace(str(Path(project_path)), ""),
                "Line": line.line_number,
                "Text": line.text,
                "p": line.count.p,
                "y": line.count.y,
                "Balanced": "Yes" if line.balanced else "No",
            })
        st.dataframe(pd.DataFrame(data), use_container_width=True, hide_index=True)
else:
    st.info("Enter a directory in the sidebar and click 'Scan Directory' to check its .txt files.")
