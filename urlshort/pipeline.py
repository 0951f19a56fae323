from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .appends import apply_appends
from .keywords import match, output_file_name
from .models import FindMode, FindResult, RunSummary, ShortenOptions
from .variations import generate_variations, parse_delimiters

log = logging.getLogger(__name__)


def process_urls(
    urls: Sequence[str],
    delimiters: str = "=",
    no_duplicates: bool = False,
    split_path: bool = False,
    append: str = "",
    append_list: Optional[Sequence[str]] = None,
) -> List[str]:
    """Expand every URL into its variations and append payloads to each.

    Results keep input order, then variation discovery order, then payload
    order. With ``no_duplicates`` a string is emitted only the first time it
    is produced anywhere in the run.
    """
    delim_list = parse_delimiters(delimiters, split_path=split_path)
    if not delim_list:
        log.warning("No valid delimiters specified. Only applying appends.")
    log.debug("Delimiters: %r", delim_list)

    seen = set()
    result: List[str] = []
    for url in urls:
        for variation in generate_variations(url, delim_list):
            for final in apply_appends(variation, append, append_list):
                if no_duplicates:
                    if final in seen:
                        continue
                    seen.add(final)
                result.append(final)
    return result


def run_finds(
    results: Sequence[str],
    find: Optional[str] = None,
    find_x: Optional[str] = None,
) -> List[FindResult]:
    """Run the keyword filters over final results, one entry per requested mode."""
    finds: List[FindResult] = []
    for mode, spec in ((FindMode.FIND, find), (FindMode.FIND_X, find_x)):
        if spec is None:
            continue
        matches = match(mode, results, spec)
        log.info("%s %r matched %d URLs", mode.value, spec, len(matches))
        finds.append(FindResult(mode=mode, keywords=spec, matches=matches, file_name=output_file_name(mode, spec)))
    return finds


def run_shorten(urls: Sequence[str], options: ShortenOptions = ShortenOptions()) -> RunSummary:
    """Library entry point: shorten ``urls`` and apply any keyword filters."""
    results = process_urls(
        urls,
        delimiters=options.delimiters,
        no_duplicates=options.no_duplicates,
        split_path=options.split_path,
        append=options.append,
        append_list=options.append_list,
    )
    finds = run_finds(results, find=options.find, find_x=options.find_x) if options.wants_find else []
    return RunSummary(
        input_count=len(urls),
        delimiters=parse_delimiters(options.delimiters, split_path=options.split_path),
        results=results,
        finds=finds,
    )
