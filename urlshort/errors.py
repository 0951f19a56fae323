from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UrlShortError(Exception):
    """Base error envelope carrying a stable code and the file it concerns."""

    code: str
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        loc = self.path or "<urlshort>"
        return f"{loc}: {self.code}: {self.message}"


class ConfigError(UrlShortError):
    pass


class InputFileError(UrlShortError):
    pass


class AppendFileError(UrlShortError):
    pass


class OutputFileError(UrlShortError):
    pass
