"""
讀音排序 (Reading Sorter)

依使用者選擇的讀音風格（文讀 / 白讀）把偏好的讀音移到前面。
穩定排序：同組內保持原順序，重複排序結果不變。
"""

from typing import Iterable, List, Optional, Union

from dialectpin.core.types import Reading, ReadingStyle

SORTABLE_STYLES = (ReadingStyle.LITERARY, ReadingStyle.COLLOQUIAL)

Preference = Optional[Union[ReadingStyle, str]]


def normalize_preference(preference: Preference) -> Optional[ReadingStyle]:
    """
    把偏好轉成 ReadingStyle；None 表示沒有偏好

    Raises:
        ValueError: 偏好不是文讀或白讀
    """
    if preference is None:
        return None
    style = ReadingStyle.coerce(preference)
    if style not in SORTABLE_STYLES:
        raise ValueError(f"Preference must be 'literary' or 'colloquial', got {preference!r}")
    return style


def sort_readings(readings: Iterable[Reading], preference: Preference = None) -> List[Reading]:
    """
    依風格偏好排序讀音

    Args:
        readings: 讀音
        preference: "literary" / "colloquial" 或對應的 ReadingStyle；None 時原順序返回

    Returns:
        List[Reading]: 新列表
    """
    style = normalize_preference(preference)
    readings = list(readings)
    if style is None:
        return readings
    return sorted(readings, key=lambda reading: 0 if reading.style is style else 1)
