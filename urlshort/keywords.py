from __future__ import annotations

from typing import Iterable, List, Optional, Set

from .models import FindMode

_UNSAFE_FILENAME_CHARS = ("/", "\\", ":")


def parse_keywords(spec: Optional[str]) -> List[str]:
    return [k.strip() for k in (spec or "").split(",") if k.strip()]


def process_find(urls: Iterable[str], spec: Optional[str]) -> Set[str]:
    """Return the urls containing at least one keyword (case-sensitive)."""
    keywords = parse_keywords(spec)
    if not keywords:
        return set()
    return {u for u in urls if any(k in u for k in keywords)}


def process_find_x(urls: Iterable[str], spec: Optional[str]) -> Set[str]:
    """Return the urls containing every keyword (case-sensitive)."""
    keywords = parse_keywords(spec)
    if not keywords:
        return set()
    return {u for u in urls if all(k in u for k in keywords)}


def match(mode: FindMode, urls: Iterable[str], spec: Optional[str]) -> Set[str]:
    if mode == FindMode.FIND_X:
        return process_find_x(urls, spec)
    return process_find(urls, spec)


def output_file_name(mode: FindMode, spec: Optional[str]) -> str:
    """Build ``<Mode>-<kw1-kw2-...>.txt`` with path-hostile characters replaced."""
    safe = "-".join(parse_keywords(spec))
    for ch in _UNSAFE_FILENAME_CHARS:
        safe = safe.replace(ch, "_")
    return f"{FindMode(mode).value}-{safe}.txt"
