from __future__ import annotations

from typing import List, Optional, Sequence


def apply_appends(
    base: str,
    append: Optional[str] = None,
    append_list: Optional[Sequence[str]] = None,
) -> List[str]:
    """Expand ``base`` with suffix payloads.

    A non-empty ``append_list`` wins and yields one string per entry; otherwise
    a non-empty ``append`` yields a single ``base + append``; otherwise the
    base is returned unchanged.
    """
    if append_list:
        return [base + suffix for suffix in append_list]
    if append:
        return [base + append]
    return [base]
