"""
方言讀音查詢引擎 (DialectEngine)

負責持有共享的詞典表與簡繁轉換器，並提供查詢入口：

- lookup: 切分一段文字並附上讀音
- lookup_lines: 逐行切分
- search: 詞 / 讀音子字串搜尋
- query: 依查詢內容自動選擇切分或搜尋
- breakdown: 列出多字詞中每個字的讀音
- reload: 重新建置詞典表（整張替換，不在原表上修改）
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Literal, Optional, Tuple

from dialectpin.config import EngineConfig
from dialectpin.core.engine_interface import LookupEngine
from dialectpin.core.events import LoadEventHandler
from dialectpin.core.protocols.normalizer import ScriptNormalizer
from dialectpin.core.types import DictionaryEntry, Reading, ReadingStyle, Segment, WordSegment
from dialectpin.dictionary.config import DictionaryConfig
from dialectpin.dictionary.table import BuildReport, DictionaryTable, SourceInput
from dialectpin.normalizer import HanziConvNormalizer
from dialectpin.search import character_readings, is_sentence_query, search
from dialectpin.segmentation.segmenter import Segmenter
from dialectpin.segmentation.sorter import Preference, normalize_preference
from dialectpin.utils.lazy_imports import check_script_dependencies


@dataclass
class QueryResult:
    """
    query() 的結果

    kind 為 "segments" 時 lines 是逐行切分結果；
    kind 為 "entries" 時 entries 是搜尋到的詞條。
    """
    kind: Literal["segments", "entries", "empty"]
    lines: List[List[Segment]] = field(default_factory=list)
    entries: List[DictionaryEntry] = field(default_factory=list)


class DialectEngine(LookupEngine):
    _engine_name = "dialect"

    def __init__(
        self,
        table: Optional[DictionaryTable] = None,
        *,
        sources: Optional[Iterable[SourceInput]] = None,
        normalizer: Optional[ScriptNormalizer] = None,
        dictionary_config: Optional[DictionaryConfig] = None,
        config: Optional[EngineConfig] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[LoadEventHandler] = None,
    ):
        if config is not None:
            verbose = verbose or config.verbose
            on_timing = on_timing or config.on_timing
            dictionary_config = dictionary_config or config.dictionary_config
        self._init_logger(verbose=verbose, on_timing=on_timing)
        self._default_preference = config.preference if config is not None else None

        with self._log_timing("DialectEngine.__init__"):
            self._dictionary_config = dictionary_config
            self._on_event = on_event
            if normalizer is None:
                check_script_dependencies()
                normalizer = HanziConvNormalizer()
            self._normalizer: ScriptNormalizer = normalizer

            if table is None:
                table = DictionaryTable.build(
                    sources or [], config=dictionary_config, on_event=on_event
                )
            self._install(table)

            self._initialized = True
            self._logger.info(f"DialectEngine initialized ({len(table)} entries)")

    def _install(self, table: DictionaryTable) -> None:
        self._table = table
        self._segmenter = Segmenter(table, self._normalizer)

    @property
    def table(self) -> DictionaryTable:
        return self._table

    @property
    def normalizer(self) -> ScriptNormalizer:
        return self._normalizer

    @property
    def segmenter(self) -> Segmenter:
        return self._segmenter

    def is_initialized(self) -> bool:
        return self._initialized

    def get_stats(self) -> Dict[str, Any]:
        report = self._table.report
        stats: Dict[str, Any] = {
            "entries": len(self._table),
            "max_word_length": self._table.max_word_length,
            "sources_loaded": list(report.sources_loaded),
            "failed_sources": report.failed_sources,
            "lines_skipped": report.lines_skipped,
        }
        cache_stats = getattr(self._normalizer, "get_cache_stats", None)
        if callable(cache_stats):
            stats["normalizer"] = cache_stats()
        return stats

    # ========== 查詢 ==========

    def _resolve_preference(self, preference: Preference) -> Optional[ReadingStyle]:
        if preference is None:
            return self._default_preference
        return normalize_preference(preference)

    @property
    def default_preference(self) -> Optional[ReadingStyle]:
        return self._default_preference

    def lookup(self, text: str, preference: Preference = None) -> List[Segment]:
        """
        切分文字並附上讀音

        Args:
            text: 查詢字串
            preference: 讀音風格偏好（"literary" / "colloquial"），None 時使用 EngineConfig 的預設偏好
        """
        style = self._resolve_preference(preference)
        with self._log_timing("DialectEngine.lookup"):
            segments = self._segmenter.segment(text)
            if style is not None:
                segments = [s.resorted(style) for s in segments]
        return segments

    def lookup_lines(self, text: str, preference: Preference = None) -> List[List[Segment]]:
        """逐行切分；空白行對應空列表"""
        style = self._resolve_preference(preference)
        with self._log_timing("DialectEngine.lookup_lines"):
            lines = self._segmenter.segment_lines(text)
            if style is not None:
                lines = [[s.resorted(style) for s in line] for line in lines]
        return lines

    def search(self, query: str) -> List[DictionaryEntry]:
        with self._log_timing("DialectEngine.search"):
            return search(self._table, query)

    def query(self, text: str, preference: Preference = None) -> QueryResult:
        """
        依查詢內容選擇動作

        單一字元直接搜尋詞典；含空格或多於一個字元則逐行切分。
        """
        if not text or not text.strip():
            return QueryResult(kind="empty")
        if is_sentence_query(text):
            return QueryResult(kind="segments", lines=self.lookup_lines(text, preference))
        return QueryResult(kind="entries", entries=self.search(text.strip()))

    def breakdown(self, segment: Segment) -> List[Tuple[str, Tuple[Reading, ...]]]:
        """多字詞片段中每個字的讀音；單字片段返回空列表"""
        if not isinstance(segment, WordSegment):
            return []
        return character_readings(self._table, segment.text)

    # ========== 重新載入 ==========

    def reload(self, sources: Iterable[SourceInput]) -> BuildReport:
        """
        以新的來源重新建置詞典表

        新表建好後才替換，查詢中的呼叫者持有的舊表不受影響。
        """
        with self._log_timing("DialectEngine.reload"):
            table = DictionaryTable.build(
                sources, config=self._dictionary_config, on_event=self._on_event
            )
            self._install(table)
        self._logger.info(f"Dictionary reloaded ({len(table)} entries)")
        return table.report
