"""Engine components orchestrating fetch → parse → dedup → notify."""

from .dedup import DeduplicationResult, DeduplicationStore, filter_new
from .fetcher import FetchRequest, FetchResponse, Fetcher
from .notifier import Notifier
from .parser import Parser, extract_note_fields
from .sources import CherryPickedSource, LKQSource

__all__ = [
    "CherryPickedSource",
    "DeduplicationResult",
    "DeduplicationStore",
    "FetchRequest",
    "FetchResponse",
    "Fetcher",
    "LKQSource",
    "Notifier",
    "Parser",
    "extract_note_fields",
    "filter_new",
]
