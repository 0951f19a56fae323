from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Type, Union

from .errors import AppendFileError, InputFileError, OutputFileError, UrlShortError

PathLike = Union[str, Path]

_READ_CODES = {InputFileError: "E_INPUT_READ", AppendFileError: "E_APPEND_READ"}


def read_lines(path: PathLike, *, error_cls: Type[UrlShortError] = InputFileError) -> List[str]:
    """Read the non-empty, whitespace-trimmed lines of a text file.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, and
    ``write_lines`` turns them back into the same bytes.

    Failures are raised as ``error_cls`` so callers can tell the input list
    apart from the append payload file.
    """
    p = Path(path)
    code = _READ_CODES.get(error_cls, "E_READ")
    try:
        with p.open(encoding="utf-8", errors="surrogateescape", newline="") as f:
            text = f.read()
    except FileNotFoundError:
        raise error_cls(code=code, message="file not found", path=str(p)) from None
    except OSError as e:
        raise error_cls(code=code, message=f"reading file: {e}", path=str(p)) from e
    # Only \n separates lines; other control characters belong to the URL
    return [line.strip() for line in text.split("\n") if line.strip()]


def write_lines(path: PathLike, lines: Iterable[str]) -> int:
    """Write one string per line, returning how many lines were written."""
    p = Path(path)
    count = 0
    try:
        with p.open("w", encoding="utf-8", errors="surrogateescape") as f:
            for line in lines:
                f.write(line + "\n")
                count += 1
    except OSError as e:
        raise OutputFileError(code="E_OUTPUT_WRITE", message=f"writing file: {e}", path=str(p)) from e
    return count
