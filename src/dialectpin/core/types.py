"""
核心資料結構

- ReadingStyle: 讀音風格（文讀 / 白讀 / 外部來源 / 未知）
- Provenance: 讀音的來源方式（字面命中 / 經繁體命中 / 經簡體命中）
- Reading: 單一讀音
- DictionaryEntry: 詞典中的一個詞條
- Segment / CharacterSegment / WordSegment: 切分結果（以 kind 區分的標記聯合）
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, List, Optional, Tuple, Union


class ReadingStyle(Enum):
    """讀音風格"""
    LITERARY = "literary"                # 文讀
    COLLOQUIAL = "colloquial"            # 白讀
    ALTERNATE_SOURCE = "alternate-source"  # 來自補充詞典
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Union["ReadingStyle", str]) -> "ReadingStyle":
        """接受 ReadingStyle 或其字串值"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown reading style: {value!r}") from None


class Provenance(Enum):
    """讀音是如何被找到的"""
    LITERAL = "literal"
    TRADITIONAL = "traditional"
    SIMPLIFIED = "simplified"


@dataclass(frozen=True)
class Reading:
    """
    單一讀音

    Attributes:
        value: 讀音文字（如 "puo"）；空字串代表「讀音未知」
        style: 讀音風格
        from_traditional: 只有經由查詢文字的繁體形式才找到
        from_simplified: 只有經由查詢文字的簡體形式才找到
    """
    value: str
    style: ReadingStyle = ReadingStyle.UNKNOWN
    from_traditional: bool = False
    from_simplified: bool = False

    @property
    def key(self) -> Tuple[str, ReadingStyle]:
        """去重用的識別 (value, style)"""
        return (self.value, self.style)

    @property
    def provenance(self) -> Provenance:
        if self.from_traditional:
            return Provenance.TRADITIONAL
        if self.from_simplified:
            return Provenance.SIMPLIFIED
        return Provenance.LITERAL

    def tagged(self, provenance: Provenance) -> "Reading":
        """回傳標記了來源的新讀音"""
        return replace(
            self,
            from_traditional=provenance is Provenance.TRADITIONAL,
            from_simplified=provenance is Provenance.SIMPLIFIED,
        )


# 查無讀音時呈現層使用的佔位讀音
UNKNOWN_READING = Reading("")


@dataclass(frozen=True)
class DictionaryEntry:
    """
    詞典詞條

    Attributes:
        word: 詞（在同一張表中唯一）
        readings: 讀音（依檔案出現順序，(value, style) 不重複）
        definition: 釋義（第一次出現者為準，可為空）
        sources: 貢獻此詞條的來源標籤
    """
    word: str
    readings: Tuple[Reading, ...] = ()
    definition: str = ""
    sources: Tuple[str, ...] = ()


@dataclass
class Segment:
    """
    切分片段基類；實際值一定是 CharacterSegment 或 WordSegment

    Attributes:
        text: 輸入中被匹配到的原始子字串
        readings: 讀音列表
        selected_index: 呈現層目前選擇的讀音索引
        matched_word: 實際用來查表的詞（經簡繁轉換命中時可能與 text 不同）
        style: 讀音中主要的風格（文讀 / 白讀），無法判斷時為 None
    """
    kind: ClassVar[str] = ""

    text: str
    readings: List[Reading] = field(default_factory=list)
    selected_index: int = 0
    matched_word: Optional[str] = None
    style: Optional[ReadingStyle] = None

    @property
    def is_unknown(self) -> bool:
        return not any(r.value for r in self.readings)

    @property
    def selected(self) -> Reading:
        if not self.readings:
            return UNKNOWN_READING
        return self.readings[self.selected_index]

    @property
    def other_readings(self) -> List[Reading]:
        return [r for i, r in enumerate(self.readings) if i != self.selected_index]

    @property
    def matched_via_variant(self) -> bool:
        return self.matched_word is not None and self.matched_word != self.text

    def select(self, index: int) -> Reading:
        """切換選擇的讀音"""
        if not 0 <= index < len(self.readings):
            raise IndexError(f"Reading index {index} out of range for {self.text!r}")
        self.selected_index = index
        return self.readings[index]

    def resorted(self, preference: Optional[Union[ReadingStyle, str]] = None) -> "Segment":
        """依風格偏好重新排序，回傳新片段（選擇重置為第一個）"""
        from dialectpin.segmentation.sorter import sort_readings

        return replace(self, readings=sort_readings(self.readings, preference), selected_index=0)


@dataclass
class CharacterSegment(Segment):
    """單字片段（含查無讀音的字元）"""
    kind: ClassVar[str] = "character"


@dataclass
class WordSegment(Segment):
    """多字詞片段"""
    kind: ClassVar[str] = "word"
