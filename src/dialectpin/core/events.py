"""
事件模型（Event Model）

詞典建置預設不輸出到 stdout。若需要知道「哪些來源載入失敗、跳過了哪些行」，
請使用事件回呼（event handler）。

建置策略是「盡量成功」：單一來源失敗只會讓該來源貢獻零個詞條，
並以 source_failed 事件回報，不會中斷其他來源。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class LoadEvent(TypedDict, total=False):
    type: Literal["source_loaded", "source_failed", "line_skipped"]
    source: str

    # source_loaded
    entries: int
    lines_skipped: int

    # source_failed
    exception_type: str
    exception_message: str

    # line_skipped
    line_number: int
    line: str


LoadEventHandler = Callable[[LoadEvent], None]
