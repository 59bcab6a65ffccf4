"""
切分器 (Segmenter)

以「最長匹配 + 簡繁備援」把查詢字串切成詞典已知的片段。

演算法（游標 i 從 0 開始，以 Unicode code point 計）:
    1. 候選長度由 min(剩餘長度, 詞典最長詞長度) 遞減到 1
    2. 每個長度依序嘗試：字面查表；轉繁體後查表（與字面不同時）；
       前者沒有結果時轉簡體後查表（與字面不同時）
    3. 字面與簡繁轉換的結果取聯集，第一個有結果的長度即為最長匹配
    4. 所有長度都沒有結果時，輸出一個沒有讀音的單字片段，游標前進 1

保證：所有片段文字依序串接後與輸入完全相同，且片段之間不重疊。
"""

import logging
import re
from collections.abc import Mapping
from typing import List, Optional

from dialectpin.core.protocols.normalizer import ScriptNormalizer
from dialectpin.core.types import (
    CharacterSegment,
    DictionaryEntry,
    Provenance,
    Segment,
    WordSegment,
)
from dialectpin.utils.logger import TimingContext, get_logger

from .resolver import ReadingResolver, Resolution, summarize_style

_LINE_BREAK = re.compile(r"\r?\n")


class Segmenter:
    """
    切分器

    Args:
        table: 詞 -> DictionaryEntry 的唯讀映射（通常是 DictionaryTable）
        normalizer: 簡繁轉換器
        resolver: 讀音解析器，預設為 ReadingResolver()
    """

    def __init__(
        self,
        table: "Mapping[str, DictionaryEntry]",
        normalizer: ScriptNormalizer,
        resolver: Optional[ReadingResolver] = None,
    ):
        self.table = table
        self.normalizer = normalizer
        self.resolver = resolver or ReadingResolver()
        max_len = getattr(table, "max_word_length", None)
        if max_len is None:
            max_len = max((len(word) for word in table), default=0)
        self.max_word_length: int = max_len
        self._logger = get_logger("segmentation.segmenter")

    def match(self, span: str) -> Resolution:
        """以字面、繁體、簡體三種方式查找單一候選片段"""
        literal = self.table.get(span)

        variant = None
        provenance = Provenance.TRADITIONAL
        traditional = self.normalizer.to_traditional(span)
        if traditional != span:
            variant = self.table.get(traditional)

        if variant is None:
            simplified = self.normalizer.to_simplified(span)
            if simplified != span:
                variant = self.table.get(simplified)
                provenance = Provenance.SIMPLIFIED

        return self.resolver.resolve(literal, variant, provenance)

    def segment(self, text: str) -> List[Segment]:
        """
        切分查詢字串

        Args:
            text: 查詢字串

        Returns:
            List[Segment]: 依序排列的片段；空字串返回空列表
        """
        segments: List[Segment] = []
        if not text:
            return segments

        with TimingContext("Segmenter.segment", self._logger, logging.DEBUG):
            i = 0
            n = len(text)
            while i < n:
                upper = min(n - i, self.max_word_length)
                found: Optional[Segment] = None
                for length in range(upper, 0, -1):
                    span = text[i:i + length]
                    resolution = self.match(span)
                    if resolution:
                        found = self._make_segment(span, resolution)
                        break

                if found is None:
                    found = CharacterSegment(text=text[i])
                segments.append(found)
                i += len(found.text)

        self._logger.debug(f"Segmented {n} chars into {len(segments)} segments")
        return segments

    def segment_lines(self, text: str) -> List[List[Segment]]:
        """逐行切分；空白行對應空列表"""
        return [
            self.segment(line) if line.strip() else []
            for line in _LINE_BREAK.split(text)
        ]

    @staticmethod
    def _make_segment(span: str, resolution: Resolution) -> Segment:
        segment_cls = WordSegment if len(span) > 1 else CharacterSegment
        return segment_cls(
            text=span,
            readings=list(resolution.readings),
            matched_word=resolution.matched_word,
            style=summarize_style(resolution.readings),
        )


def segment(
    table: "Mapping[str, DictionaryEntry]",
    normalizer: ScriptNormalizer,
    text: str,
) -> List[Segment]:
    """Segmenter(table, normalizer).segment(text) 的函式版本"""
    return Segmenter(table, normalizer).segment(text)


def segment_lines(
    table: "Mapping[str, DictionaryEntry]",
    normalizer: ScriptNormalizer,
    text: str,
) -> List[List[Segment]]:
    """Segmenter(table, normalizer).segment_lines(text) 的函式版本"""
    return Segmenter(table, normalizer).segment_lines(text)
