"""
詞典格式配置

定義詞典檔的註解符號、Rime 表頭結尾，以及讀音風格的判定規則。
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from dialectpin.core.types import ReadingStyle


def _default_source_style_rules() -> Dict[ReadingStyle, Tuple[str, ...]]:
    return {
        ReadingStyle.LITERARY: (".literary.", "文读", "文讀"),
        ReadingStyle.COLLOQUIAL: (".colloquial.", "白读", "白讀"),
        ReadingStyle.ALTERNATE_SOURCE: (".alt.", ".extra.", "补充", "補充"),
    }


@dataclass
class DictionaryConfig:
    """
    詞典格式配置

    Attributes:
        comment_prefix: 以此開頭的行視為註解
        header_terminator: Rime .dict.yaml 表頭結尾行（該行與之前的內容全部忽略）
        literary_markers: 釋義中出現即判定為文讀的標記
        colloquial_markers: 釋義中出現即判定為白讀的標記
        source_style_rules: 來源標籤（檔名）包含特定子字串時，
                            該來源所有讀音一律使用對應風格（不分大小寫）

    注意：
        釋義標記只是子字串比對，釋義中偶然出現「文」「白」等字也會被判定，
        這是已知的雜訊來源。
    """

    comment_prefix: str = "#"
    header_terminator: str = "..."
    literary_markers: Tuple[str, ...] = ("文",)
    colloquial_markers: Tuple[str, ...] = ("白",)
    source_style_rules: Dict[ReadingStyle, Tuple[str, ...]] = field(
        default_factory=_default_source_style_rules
    )

    def style_for_source(self, source_tag: str) -> Optional[ReadingStyle]:
        """來源標籤對應的單一風格；一般來源回傳 None"""
        tag = (source_tag or "").lower()
        if not tag:
            return None
        for style, needles in self.source_style_rules.items():
            if any(needle.lower() in tag for needle in needles):
                return style
        return None

    def style_for_definition(self, definition: str) -> ReadingStyle:
        """依釋義中的標記判定風格，先檢查文讀再檢查白讀"""
        if definition:
            if any(marker in definition for marker in self.literary_markers):
                return ReadingStyle.LITERARY
            if any(marker in definition for marker in self.colloquial_markers):
                return ReadingStyle.COLLOQUIAL
        return ReadingStyle.UNKNOWN


DEFAULT_DICTIONARY_CONFIG = DictionaryConfig()
