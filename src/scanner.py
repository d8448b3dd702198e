"""Scanner module – discovers text files and checks every line for p/y balance."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.balance import LetterCount, count_letters


@dataclass
class LineResult:
    """Outcome of checking a single line of a text file."""

    file_path: Path
    line_number: int
    text: str
    count: LetterCount

    @property
    def balanced(self) -> bool:
        return self.count.balanced


@dataclass
class ScanResult:
    """Aggregated result of scanning a set of text files."""

    files_scanned: int = 0
    lines: list[LineResult] = field(default_factory=list)

    @property
    def unbalanced_lines(self) -> list[LineResult]:
        """Return only the lines whose 'p' and 'y' counts differ."""
        return [line for line in self.lines if not line.balanced]


_DEFAULT_EXCLUDE_DIRS = {"venv", ".venv", "node_modules", "__pycache__", ".git"}


def get_text_files(path: str, excluded_dirs: list[str] | None = None) -> list[Path]:
    """List the text files that *path* points at.

    A ``.txt`` file comes back as a one-element list holding its resolved
    path; any other file gives ``[]``. A directory is walked recursively and
    every ``.txt`` below it is returned, sorted, except those under one of
    ``_DEFAULT_EXCLUDE_DIRS`` or *excluded_dirs*. A path that does not exist
    gives ``[]``.
    """
    target = Path(path).resolve()

    if target.is_file():
        if target.suffix != ".txt":
            return []
        return [target]

    if not target.is_dir():
        return []

    skip = _DEFAULT_EXCLUDE_DIRS | set(excluded_dirs or [])
    files: list[Path] = []
    for child in sorted(target.rglob("*.txt")):
        rel_parts = child.relative_to(target).parts
        if any(part in skip for part in rel_parts):
            continue
        files.append(child)
    return files


def check_lines(file_path: Path) -> list[LineResult]:
    """Read a single text file and check each of its lines."""
    source = file_path.read_text(encoding="utf-8")
    return [
        LineResult(
            file_path=file_path,
            line_number=number,
            text=line,
            count=count_letters(line),
        )
        for number, line in enumerate(source.splitlines(), start=1)
    ]


def scan_texts(root: Path, exclude_dirs: set[str] | None = None) -> ScanResult:
    """Collect text files under *root*, check every line, return aggregated results."""
    files = get_text_files(str(root), excluded_dirs=sorted(exclude_dirs or []))
    result = ScanResult(files_scanned=len(files))
    for f in files:
        result.lines.extend(check_lines(f))
    return result
