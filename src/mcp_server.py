"""MCP Server – exposes the p/y balance check as tools for Cursor, Claude Desktop, etc."""

from __future__ import annotations

import json
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from src.balance import count_letters
from src.scanner import LineResult, check_lines, get_text_files

mcp = FastMCP(
    name="PYBalance",
    instructions=(
        "PYBalance: checks whether text contains as many 'p' letters as "
        "'y' letters, ignoring case."
    ),
)

_DEFAULT_EXCLUDE = {"venv", ".venv", "node_modules", "__pycache__", ".git"}


@mcp.tool()
def check_text(text: str) -> str:
    """Count 'p' and 'y' in a string and report whether they match.

    Args:
        text: The string to check.

    Returns:
        JSON string with both counts and the balanced verdict.
    """
    count = count_letters(text)
    return json.dumps({
        "text": text,
        "p": count.p,
        "y": count.y,
        "balanced": count.balanced,
    })


@mcp.tool()
def scan_path(path: str) -> str:
    """Check every line of every .txt file under a file or directory.

    Files that cannot be read are reported under ``errors`` and the scan
    carries on with the rest.

    Args:
        path: Path to a .txt file or a directory to scan.

    Returns:
        JSON string with scan totals, the unbalanced lines and any read errors.
    """
    root = Path(path).resolve()
    if not root.exists():
        return json.dumps({"error": f"Path not found: {path}"})

    files = get_text_files(str(root), excluded_dirs=sorted(_DEFAULT_EXCLUDE))

    lines: list[LineResult] = []
    errors = []
    for file in files:
        try:
            lines.extend(check_lines(file))
        except Exception as exc:
            errors.append({"file": str(file), "error": str(exc)})

    unbalanced = []
    for line in lines:
        if line.balanced:
            continue
        unbalanced.append({
            "file": str(line.file_path),
            "line": line.line_number,
            "text": line.text,
            "p": line.count.p,
            "y": line.count.y,
        })

    return json.dumps({
        "files_scanned": len(files),
        "lines_checked": len(lines),
        "unbalanced": unbalanced,
        "errors": errors,
    }, indent=2)


def run_server() -> None:
    """Start the MCP server using stdio transport."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
