"""
詞典模組

- DictionaryTable: 唯讀詞典表
- DictionaryConfig: 詞典格式與讀音風格判定配置
- parse_source: 單一來源解析
"""

from .config import DEFAULT_DICTIONARY_CONFIG, DictionaryConfig
from .parser import ParsedLine, ParsedSource, parse_source, split_line, strip_header
from .table import BuildReport, DictionaryTable, build_table, read_source_text

__all__ = [
    "DictionaryTable",
    "BuildReport",
    "build_table",
    "read_source_text",
    "DictionaryConfig",
    "DEFAULT_DICTIONARY_CONFIG",
    "ParsedLine",
    "ParsedSource",
    "parse_source",
    "split_line",
    "strip_header",
]
