from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple


class FindMode(str, Enum):
    FIND = "Find"  # any keyword
    FIND_X = "FindX"  # all keywords


@dataclass(frozen=True)
class ShortenOptions:
    delimiters: str = "="
    no_duplicates: bool = False
    split_path: bool = False
    append: str = ""
    append_list: Tuple[str, ...] = ()
    find: Optional[str] = None
    find_x: Optional[str] = None

    @property
    def wants_find(self) -> bool:
        return self.find is not None or self.find_x is not None


@dataclass
class FindResult:
    mode: FindMode
    keywords: str
    matches: Set[str]
    file_name: str

    @property
    def sorted_matches(self) -> List[str]:
        # Sets carry no order; files and console get a stable one
        return sorted(self.matches)


@dataclass
class RunSummary:
    input_count: int
    delimiters: List[str]
    results: List[str]
    finds: List[FindResult] = field(default_factory=list)

    @property
    def result_count(self) -> int:
        return len(self.results)
