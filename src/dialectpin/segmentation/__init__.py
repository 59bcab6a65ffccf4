"""
切分與讀音解析

- Segmenter: 最長匹配切分（含簡繁備援）
- ReadingResolver: 讀音來源標記與合併
- sort_readings: 依文讀 / 白讀偏好穩定排序
"""

from .resolver import ReadingResolver, Resolution, merge_readings, summarize_style, tag_readings
from .segmenter import Segmenter, segment, segment_lines
from .sorter import normalize_preference, sort_readings

__all__ = [
    "Segmenter",
    "segment",
    "segment_lines",
    "ReadingResolver",
    "Resolution",
    "merge_readings",
    "summarize_style",
    "tag_readings",
    "sort_readings",
    "normalize_preference",
]
