"""
核心抽象層

定義資料結構、事件、例外與介面。
"""

from .engine_interface import LookupEngine
from .events import LoadEvent, LoadEventHandler
from .exceptions import DialectPinError, SourceReadError
from .protocols import ScriptNormalizer, is_simplified
from .types import (
    UNKNOWN_READING,
    CharacterSegment,
    DictionaryEntry,
    Provenance,
    Reading,
    ReadingStyle,
    Segment,
    WordSegment,
)

__all__ = [
    "LookupEngine",
    "LoadEvent",
    "LoadEventHandler",
    "DialectPinError",
    "SourceReadError",
    "ScriptNormalizer",
    "is_simplified",
    "UNKNOWN_READING",
    "CharacterSegment",
    "DictionaryEntry",
    "Provenance",
    "Reading",
    "ReadingStyle",
    "Segment",
    "WordSegment",
]
