"""urlshort - URL shortener and parameter generator

Expands URLs into every truncation at delimiter boundaries, appends payloads
and filters the results by keyword. Usable as a script or a library.
"""

from .appends import apply_appends
from .keywords import process_find, process_find_x
from .pipeline import process_urls, run_shorten
from .variations import generate_variations

__all__ = [
    "apply_appends",
    "generate_variations",
    "process_find",
    "process_find_x",
    "process_urls",
    "run_shorten",
]
__version__ = "1.0.0"
