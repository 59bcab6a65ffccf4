"""
詞典子字串搜尋

不經過切分器，直接在詞典表中找詞或讀音包含查詢字串的詞條。
"""

from collections.abc import Mapping
from typing import List, Tuple

from dialectpin.core.types import DictionaryEntry, Reading
from dialectpin.utils.logger import log_timing


@log_timing("search")
def search(table: "Mapping[str, DictionaryEntry]", query: str) -> List[DictionaryEntry]:
    """
    子字串搜尋

    詞包含查詢字串，或任一讀音（不分大小寫）包含查詢字串即符合。
    結果依詞典表順序，不另外排序。空白查詢返回空列表。

    Args:
        table: 詞典表
        query: 查詢字串

    Returns:
        List[DictionaryEntry]
    """
    if not query or not query.strip():
        return []

    folded = query.casefold()
    results = []
    for entry in table.values():
        if query in entry.word or any(folded in r.value.casefold() for r in entry.readings):
            results.append(entry)
    return results


def is_sentence_query(query: str) -> bool:
    """
    判斷查詢應該切分（句子）還是直接搜尋（單字）

    去掉首尾空白後含有空格，或長度超過一個字元，視為句子。
    """
    trimmed = query.strip()
    return " " in trimmed or len(trimmed) > 1


def character_readings(
    table: "Mapping[str, DictionaryEntry]", word: str
) -> List[Tuple[str, Tuple[Reading, ...]]]:
    """
    逐字列出詞中每個字在詞典中的讀音（只做字面查表）

    >>> character_readings(table, "莆仙")  # doctest: +SKIP
    [('莆', (Reading('puo', ...),)), ('仙', (Reading('sieng', ...),))]
    """
    results = []
    for char in word:
        entry = table.get(char)
        results.append((char, entry.readings if entry is not None else ()))
    return results
