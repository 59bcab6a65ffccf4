"""
Script Normalizer Protocol

定義簡繁轉換能力的最小介面。切分器只依賴此介面，
測試時可以替換成小型對照表實作。
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScriptNormalizer(Protocol):
    def to_traditional(self, text: str) -> str:
        """轉為繁體；無法轉換的字元原樣保留"""
        ...

    def to_simplified(self, text: str) -> str:
        """轉為簡體；無法轉換的字元原樣保留"""
        ...


def is_simplified(normalizer: ScriptNormalizer, text: str) -> bool:
    """
    粗略判斷文字是否為簡體

    僅為啟發式：簡繁同形的字也會被判為簡體。
    """
    return normalizer.to_simplified(normalizer.to_traditional(text)) == text
