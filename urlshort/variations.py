from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, List

log = logging.getLogger(__name__)

PATH_DELIMITER = "/"


def parse_delimiters(spec: str, split_path: bool = False) -> List[str]:
    """Turn a comma separated delimiter spec into a clean delimiter list.

    Tokens are trimmed; empty and repeated tokens are dropped. With
    ``split_path`` the path separator ``/`` is added unless already present.
    """
    delimiters: List[str] = []
    for raw in (spec or "").split(","):
        token = raw.strip()
        if token and token not in delimiters:
            delimiters.append(token)
    if split_path and PATH_DELIMITER not in delimiters:
        delimiters.append(PATH_DELIMITER)
    return delimiters


def generate_variations(url: str, delimiters: Iterable[str]) -> List[str]:
    """Generate every truncation of ``url`` that ends at a delimiter.

    Breadth-first: each newly found prefix is split again against all
    delimiters, so ``/`` truncations get further cut at ``=`` and so on.
    The original URL is always the first element; the rest follow in order
    of first discovery.
    """
    delims = [d for d in delimiters if d]
    variations: List[str] = [url]
    if not delims:
        return variations

    seen = {url}
    queue = deque([url])
    while queue:
        current = queue.popleft()
        for delim in delims:
            parts = current.split(delim)
            if len(parts) <= 1:
                continue
            for i in range(1, len(parts)):
                prefix = delim.join(parts[:i]) + delim
                if prefix in seen:
                    continue
                seen.add(prefix)
                variations.append(prefix)
                queue.append(prefix)

    log.debug("%d variations for %s", len(variations), url)
    return variations
