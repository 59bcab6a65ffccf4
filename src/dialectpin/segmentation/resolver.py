"""
讀音解析 (Reading Resolver)

把某個候選片段在詞典中找到的詞條整理成最終讀音列表：

1. 依找到的方式標記來源（字面 / 經繁體 / 經簡體）
2. 字面命中與簡繁轉換命中的讀音取聯集，以 (value, style) 去重，先出現者保留
3. 記錄實際用來查表的詞：字面命中優先
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from dialectpin.core.types import DictionaryEntry, Provenance, Reading, ReadingStyle


@dataclass
class Resolution:
    """單一候選片段的解析結果"""
    readings: List[Reading] = field(default_factory=list)
    matched_word: Optional[str] = None
    provenance: Optional[Provenance] = None

    def __bool__(self) -> bool:
        return bool(self.readings)


def tag_readings(readings: Iterable[Reading], provenance: Provenance) -> List[Reading]:
    """為每個讀音標上來源旗標"""
    return [reading.tagged(provenance) for reading in readings]


def merge_readings(*groups: Iterable[Reading]) -> List[Reading]:
    """
    依序合併多組讀音，(value, style) 相同者只保留第一個

    >>> a = [Reading("puo", ReadingStyle.LITERARY)]
    >>> b = [Reading("puo", ReadingStyle.LITERARY, from_traditional=True), Reading("pu")]
    >>> [r.value for r in merge_readings(a, b)]
    ['puo', 'pu']
    """
    merged: List[Reading] = []
    seen = set()
    for group in groups:
        for reading in group:
            if reading.key in seen:
                continue
            seen.add(reading.key)
            merged.append(reading)
    return merged


def summarize_style(readings: Sequence[Reading]) -> Optional[ReadingStyle]:
    """
    歸納片段的主要讀音風格

    文讀與白讀中較多者勝出；數量相同時取較早出現者；兩者皆無時為 None。
    """
    counts = {ReadingStyle.LITERARY: 0, ReadingStyle.COLLOQUIAL: 0}
    first_seen: List[ReadingStyle] = []
    for reading in readings:
        if reading.style in counts:
            counts[reading.style] += 1
            if reading.style not in first_seen:
                first_seen.append(reading.style)
    if not first_seen:
        return None
    return max(first_seen, key=lambda style: (counts[style], -first_seen.index(style)))


class ReadingResolver:
    """
    讀音解析器

    不持有狀態；每次 resolve 都產生新的 Reading 物件，
    不會修改詞典表中的詞條。
    """

    def resolve(
        self,
        literal: Optional[DictionaryEntry],
        variant: Optional[DictionaryEntry] = None,
        variant_provenance: Provenance = Provenance.TRADITIONAL,
    ) -> Resolution:
        """
        Args:
            literal: 字面查表命中的詞條
            variant: 經簡繁轉換查表命中的詞條
            variant_provenance: variant 的來源（TRADITIONAL 或 SIMPLIFIED）

        Returns:
            Resolution: 讀音為空表示沒有命中
        """
        if variant_provenance is Provenance.LITERAL:
            raise ValueError("variant_provenance must be TRADITIONAL or SIMPLIFIED")

        literal_readings = tag_readings(literal.readings, Provenance.LITERAL) if literal else []
        variant_readings = tag_readings(variant.readings, variant_provenance) if variant else []
        readings = merge_readings(literal_readings, variant_readings)
        if not readings:
            return Resolution()

        if literal_readings:
            return Resolution(readings, literal.word, Provenance.LITERAL)
        return Resolution(readings, variant.word, variant_provenance)
