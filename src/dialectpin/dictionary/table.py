"""
詞典表 (DictionaryTable)

由一個或多個詞典來源建立的唯讀映射 `詞 -> DictionaryEntry`。

- 同一個詞出現在多行或多個檔案時，讀音以 (value, style) 去重後合併，釋義保留第一次出現者
- 單一來源讀取失敗只會讓該來源貢獻零個詞條，並記錄在 BuildReport
- 建好之後不可修改；重新載入請重新 build 一張新表

使用方式:
    from dialectpin import DictionaryTable

    table = DictionaryTable.build([(text, "Pouleng.dict.yaml")])
    table = DictionaryTable.from_files(["dicts/Pouleng.dict.yaml"])
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from dialectpin.core.events import LoadEvent, LoadEventHandler
from dialectpin.core.exceptions import SourceReadError
from dialectpin.core.types import DictionaryEntry, Reading, ReadingStyle
from dialectpin.utils.logger import TimingContext, get_logger

from .config import DEFAULT_DICTIONARY_CONFIG, DictionaryConfig
from .parser import parse_source

SourceText = Union[str, bytes, "os.PathLike[str]"]
SourceInput = Tuple[SourceText, str]

_logger = get_logger("dictionary.table")


@dataclass
class BuildReport:
    """詞典建置結果摘要"""
    sources_loaded: List[str] = field(default_factory=list)
    failures: List[SourceReadError] = field(default_factory=list)
    lines_skipped: int = 0
    entries: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_sources(self) -> List[str]:
        return [failure.source for failure in self.failures]


class _EntryBuilder:
    """建置期間累積單一詞條的可變暫存"""

    __slots__ = ("word", "readings", "seen", "definition", "sources")

    def __init__(self, word: str, definition: str):
        self.word = word
        self.readings: List[Reading] = []
        self.seen: Set[Tuple[str, ReadingStyle]] = set()
        self.definition = definition
        self.sources: List[str] = []

    def add(self, reading: Reading, source_tag: str) -> None:
        if reading.key not in self.seen:
            self.seen.add(reading.key)
            self.readings.append(reading)
        if source_tag not in self.sources:
            self.sources.append(source_tag)

    def freeze(self) -> DictionaryEntry:
        return DictionaryEntry(
            word=self.word,
            readings=tuple(self.readings),
            definition=self.definition,
            sources=tuple(self.sources),
        )


def read_source_text(text: SourceText) -> str:
    """
    取得來源內容

    str 視為已載入的內容；bytes 以 UTF-8 解碼；PathLike 從磁碟讀取。
    """
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8-sig")
    if isinstance(text, os.PathLike):
        return Path(text).read_text(encoding="utf-8-sig")
    raise TypeError(f"Unsupported dictionary source type: {type(text).__name__}")


class DictionaryTable(Mapping):
    """
    唯讀詞典表

    以詞為鍵的 Mapping，迭代順序為詞第一次出現的順序。

    Attributes:
        max_word_length: 最長詞的長度（Unicode code point），切分時用來限制候選長度
        report: 建置結果摘要
    """

    def __init__(
        self,
        entries: Optional[Dict[str, DictionaryEntry]] = None,
        report: Optional[BuildReport] = None,
    ):
        """
        直接以詞條建表（build 之外的入口，例如測試或自行組裝的詞典）

        Raises:
            ValueError: 鍵與 entry.word 不一致，或同一詞條有重複的 (value, style)
        """
        data = dict(entries or {})
        for word, entry in data.items():
            _check_entry(word, entry)
        self._entries = MappingProxyType(data)
        self._max_word_length = max((len(word) for word in data), default=0)
        self._report = report or BuildReport(entries=len(data))

    # ========== Mapping 介面 ==========

    def __getitem__(self, word: str) -> DictionaryEntry:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DictionaryTable(entries={len(self)}, max_word_length={self._max_word_length})"

    @property
    def max_word_length(self) -> int:
        return self._max_word_length

    @property
    def report(self) -> BuildReport:
        return self._report

    # ========== 建置 ==========

    @classmethod
    def build(
        cls,
        sources: Iterable[SourceInput],
        config: Optional[DictionaryConfig] = None,
        on_event: Optional[LoadEventHandler] = None,
    ) -> "DictionaryTable":
        """
        由多個來源建立詞典表

        Args:
            sources: (內容, 來源標籤) 序列；內容可為 str、UTF-8 bytes 或檔案路徑
            config: 詞典格式配置
            on_event: 載入事件回呼

        Returns:
            DictionaryTable: 新的唯讀詞典表（部分來源失敗時仍會返回）
        """
        config = config or DEFAULT_DICTIONARY_CONFIG
        report = BuildReport()
        builders: Dict[str, _EntryBuilder] = {}

        with TimingContext("DictionaryTable.build", _logger, logging.DEBUG):
            for text, source_tag in sources:
                source_tag = str(source_tag or "")
                try:
                    content = read_source_text(text)
                except (OSError, UnicodeDecodeError, TypeError) as exc:
                    failure = SourceReadError(source_tag, exc)
                    report.failures.append(failure)
                    _logger.warning(str(failure))
                    _emit(
                        on_event,
                        {
                            "type": "source_failed",
                            "source": source_tag,
                            "exception_type": type(exc).__name__,
                            "exception_message": str(exc),
                        },
                    )
                    continue

                parsed = parse_source(content, source_tag, config)
                new_words = 0
                for line in parsed.lines:
                    builder = builders.get(line.word)
                    if builder is None:
                        builder = _EntryBuilder(line.word, line.definition)
                        builders[line.word] = builder
                        new_words += 1
                    builder.add(line.reading, source_tag)

                for number, raw in parsed.skipped:
                    _logger.debug(f"  [Skip] {source_tag}:{number} {raw!r}")
                    _emit(
                        on_event,
                        {"type": "line_skipped", "source": source_tag, "line_number": number, "line": raw},
                    )

                report.sources_loaded.append(source_tag)
                report.lines_skipped += len(parsed.skipped)
                _logger.debug(
                    f"Loaded {source_tag or '<anonymous>'}: {len(parsed.lines)} lines, "
                    f"{new_words} new words, {len(parsed.skipped)} skipped"
                )
                _emit(
                    on_event,
                    {
                        "type": "source_loaded",
                        "source": source_tag,
                        "entries": len(parsed.lines),
                        "lines_skipped": len(parsed.skipped),
                    },
                )

            entries = {word: builder.freeze() for word, builder in builders.items()}
            report.entries = len(entries)

        _logger.info(
            f"Dictionary built: {report.entries} entries from {len(report.sources_loaded)} sources"
            + (f", {len(report.failures)} failed" if report.failures else "")
        )
        return cls(entries, report)

    @classmethod
    def from_files(
        cls,
        paths: Iterable[Union[str, "os.PathLike[str]"]],
        config: Optional[DictionaryConfig] = None,
        on_event: Optional[LoadEventHandler] = None,
    ) -> "DictionaryTable":
        """由檔案路徑建立詞典表，來源標籤為檔名"""
        sources = [(Path(path), Path(path).name) for path in paths]
        return cls.build(sources, config=config, on_event=on_event)


def build_table(
    sources: Iterable[SourceInput],
    config: Optional[DictionaryConfig] = None,
    on_event: Optional[LoadEventHandler] = None,
) -> DictionaryTable:
    """DictionaryTable.build 的函式版本"""
    return DictionaryTable.build(sources, config=config, on_event=on_event)


def _emit(handler: Optional[LoadEventHandler], event: LoadEvent) -> None:
    try:
        if handler is not None:
            handler(event)
    except Exception:
        _logger.exception("on_event 回呼執行失敗")


def _check_entry(word: str, entry: DictionaryEntry) -> None:
    if entry.word != word:
        raise ValueError(f"Entry key {word!r} does not match entry word {entry.word!r}")
    seen: Set[Tuple[str, ReadingStyle]] = set()
    for reading in entry.readings:
        if reading.key in seen:
            raise ValueError(f"Duplicate reading {reading.key!r} in entry {word!r}")
        seen.add(reading.key)
