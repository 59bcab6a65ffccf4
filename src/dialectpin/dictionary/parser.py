"""
詞典檔解析

格式：UTF-8，每行一筆 `詞<TAB>讀音<TAB>釋義...`，釋義為第二個 tab 之後的全部內容。
空行與註解行忽略；欄位不足兩個的行跳過（非致命）。
Rime 的 .dict.yaml 檔會先去掉 `---` 開頭、`...` 結尾的 YAML 表頭。
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from dialectpin.core.types import Reading, ReadingStyle

from .config import DEFAULT_DICTIONARY_CONFIG, DictionaryConfig


@dataclass(frozen=True)
class ParsedLine:
    word: str
    reading: Reading
    definition: str
    line_number: int


@dataclass
class ParsedSource:
    """單一來源的解析結果"""
    source_tag: str
    lines: List[ParsedLine] = field(default_factory=list)
    skipped: List[Tuple[int, str]] = field(default_factory=list)


def _split_lines(text: str) -> List[str]:
    """只以 \\n 斷行，行尾的 \\r 一併去掉；U+2028 等其他分隔字元視為內容"""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def strip_header(
    text: str,
    terminator: str = "...",
    comment_prefix: str = "#",
    opener: str = "---",
) -> Tuple[str, int]:
    """
    去掉 Rime .dict.yaml 的 YAML 表頭

    只有在檔案（略過開頭的空行與註解行後）以 `---` 開始時才視為有表頭，
    表頭到第一個 `...` 行為止。沒有 `---` 開頭的 TSV 檔中單獨的 `...` 行是普通內容。

    Returns:
        (表頭之後的內容, 被去掉的行數)；沒有表頭時原樣返回與 0
    """
    if not terminator:
        return text, 0
    parts = text.split("\n")
    opened = False
    for index, part in enumerate(parts):
        stripped = part.strip()
        if not opened:
            if not stripped or (comment_prefix and stripped.startswith(comment_prefix)):
                continue
            if stripped != opener:
                return text, 0
            opened = True
        elif stripped == terminator:
            return "\n".join(parts[index + 1:]), index + 1
    return text, 0


def split_line(line: str) -> Optional[Tuple[str, str, str]]:
    """
    拆出 (詞, 讀音, 釋義)；欄位不足時回傳 None

    >>> split_line("莆仙\\tpuosieng\\t地名\\t白")
    ('莆仙', 'puosieng', '地名\\t白')
    """
    parts = line.split("\t", 2)
    if len(parts) < 2:
        return None
    word = parts[0].strip()
    reading = parts[1].strip()
    if not word or not reading:
        return None
    definition = parts[2].strip() if len(parts) > 2 else ""
    return word, reading, definition


def iter_lines(text: str, config: DictionaryConfig) -> Iterator[Tuple[int, str]]:
    """逐行輸出 (行號, 內容)，已略過空行、註解行與表頭"""
    body, offset = strip_header(text, config.header_terminator, config.comment_prefix)
    for number, line in enumerate(_split_lines(body), start=offset + 1):
        stripped = line.strip()
        if not stripped or stripped.startswith(config.comment_prefix):
            continue
        yield number, line


def parse_source(
    text: str,
    source_tag: str = "",
    config: Optional[DictionaryConfig] = None,
) -> ParsedSource:
    """
    解析單一來源的全部內容

    Args:
        text: 詞典檔內容
        source_tag: 來源標籤（通常是檔名），可能決定預設讀音風格
        config: 詞典格式配置

    Returns:
        ParsedSource: 有效行與被跳過的行
    """
    config = config or DEFAULT_DICTIONARY_CONFIG
    source_style: Optional[ReadingStyle] = config.style_for_source(source_tag)
    result = ParsedSource(source_tag=source_tag)

    for number, line in iter_lines(text, config):
        fields = split_line(line)
        if fields is None:
            result.skipped.append((number, line))
            continue
        word, value, definition = fields
        style = source_style or config.style_for_definition(definition)
        result.lines.append(
            ParsedLine(
                word=word,
                reading=Reading(value=value, style=style),
                definition=definition,
                line_number=number,
            )
        )

    return result
