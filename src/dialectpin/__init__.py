"""
dialectpin - 方言詞典讀音查詢 (Dialect Dictionary Pronunciation Lookup)

核心概念：
- 詞典檔（每行 `詞<TAB>讀音<TAB>釋義`）建成唯讀詞典表，可合併多個檔案
- 查詢文字以最長匹配切分，字面查不到時改用繁體 / 簡體形式再查
- 每個讀音記錄是如何被找到的（字面 / 經繁體 / 經簡體），並可依文讀 / 白讀偏好排序

官方入口（穩定 API）：
- `dialectpin.DialectEngine`
- `dialectpin.DictionaryTable`
- `dialectpin.segment` / `dialectpin.sort_readings` / `dialectpin.search`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from dialectpin.engine import DialectEngine, QueryResult

# =============================================================================
# 詞典與切分
# =============================================================================
from dialectpin.dictionary import BuildReport, DictionaryConfig, DictionaryTable, build_table
from dialectpin.normalizer import HanziConvNormalizer, MappingNormalizer
from dialectpin.search import character_readings, is_sentence_query, search
from dialectpin.segmentation import ReadingResolver, Segmenter, segment, segment_lines, sort_readings

# =============================================================================
# 資料結構與介面
# =============================================================================
from dialectpin.core import (
    UNKNOWN_READING,
    CharacterSegment,
    DialectPinError,
    DictionaryEntry,
    LoadEvent,
    Provenance,
    Reading,
    ReadingStyle,
    ScriptNormalizer,
    Segment,
    SourceReadError,
    WordSegment,
    is_simplified,
)

# =============================================================================
# 配置與日誌工具
# =============================================================================
from dialectpin.config import EngineConfig
from dialectpin.utils.lazy_imports import check_script_dependencies
from dialectpin.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Engine
    "DialectEngine",
    "QueryResult",
    "EngineConfig",
    # Dictionary
    "DictionaryTable",
    "DictionaryConfig",
    "BuildReport",
    "build_table",
    # Operations
    "segment",
    "segment_lines",
    "sort_readings",
    "search",
    "is_sentence_query",
    "character_readings",
    "Segmenter",
    "ReadingResolver",
    # Normalizers
    "ScriptNormalizer",
    "HanziConvNormalizer",
    "MappingNormalizer",
    "is_simplified",
    # Types
    "Reading",
    "ReadingStyle",
    "Provenance",
    "DictionaryEntry",
    "Segment",
    "CharacterSegment",
    "WordSegment",
    "UNKNOWN_READING",
    "LoadEvent",
    "DialectPinError",
    "SourceReadError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependencies
    "check_script_dependencies",
]

__version__ = "0.1.0"
