"""
簡繁轉換器 (Script Normalizer)

切分器查表時的輔助工具：把查詢片段轉成繁體或簡體再查一次。
轉換器以參數注入，不使用模組層級的單例。

- HanziConvNormalizer: 以 hanziconv 為後端（延遲載入），結果以實例為單位緩存
- MappingNormalizer: 以明確的「繁 -> 簡」字元對照表轉換，適合方言自訂字表與測試
"""

from typing import Dict, Mapping, Optional

from dialectpin.core.protocols.normalizer import ScriptNormalizer, is_simplified
from dialectpin.utils.cache import cached_method, get_cache_stats
from dialectpin.utils.lazy_imports import get_hanziconv
from dialectpin.utils.logger import get_logger


class HanziConvNormalizer:
    """
    hanziconv 簡繁轉換器

    hanziconv 的轉換表是全域靜態資源，本類別只是把它包裝成可注入的能力。
    """

    def __init__(self):
        self._logger = get_logger("normalizer.hanziconv")
        self._converter = None

    @property
    def converter(self):
        """延遲載入 hanziconv.HanziConv"""
        if self._converter is None:
            self._converter = get_hanziconv()
            self._logger.debug("hanziconv loaded")
        return self._converter

    @cached_method(maxsize=8192)
    def to_traditional(self, text: str) -> str:
        if not text:
            return text
        return self.converter.toTraditional(text)

    @cached_method(maxsize=8192)
    def to_simplified(self, text: str) -> str:
        if not text:
            return text
        return self.converter.toSimplified(text)

    def is_simplified(self, text: str) -> bool:
        return is_simplified(self, text)

    def get_cache_stats(self) -> Dict[str, dict]:
        return {
            "to_traditional": get_cache_stats("HanziConvNormalizer.to_traditional"),
            "to_simplified": get_cache_stats("HanziConvNormalizer.to_simplified"),
        }


class MappingNormalizer:
    """
    對照表簡繁轉換器

    Args:
        traditional_to_simplified: 繁體字 -> 簡體字 對照
        simplified_to_traditional: 簡體字 -> 繁體字 對照；省略時由前者反推
                                   （多個繁體對應同一簡體時取第一個）

    範例:
        >>> norm = MappingNormalizer({"話": "话", "語": "语"})
        >>> norm.to_traditional("莆仙话")
        '莆仙話'
        >>> norm.to_simplified("莆仙話")
        '莆仙话'
    """

    def __init__(
        self,
        traditional_to_simplified: Mapping[str, str],
        simplified_to_traditional: Optional[Mapping[str, str]] = None,
    ):
        self._t2s: Dict[str, str] = dict(traditional_to_simplified)
        if simplified_to_traditional is None:
            s2t: Dict[str, str] = {}
            for trad, simp in self._t2s.items():
                s2t.setdefault(simp, trad)
        else:
            s2t = dict(simplified_to_traditional)
        self._s2t = s2t

        for table in (self._t2s, self._s2t):
            for key in table:
                if len(key) != 1:
                    raise ValueError(f"Mapping keys must be single characters, got {key!r}")

        self._to_traditional_table = str.maketrans(self._s2t)
        self._to_simplified_table = str.maketrans(self._t2s)

    def to_traditional(self, text: str) -> str:
        return text.translate(self._to_traditional_table)

    def to_simplified(self, text: str) -> str:
        return text.translate(self._to_simplified_table)

    def is_simplified(self, text: str) -> bool:
        return is_simplified(self, text)

    def __len__(self) -> int:
        return len(self._t2s)


__all__ = ["ScriptNormalizer", "HanziConvNormalizer", "MappingNormalizer", "is_simplified"]
