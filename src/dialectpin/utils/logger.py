"""
日誌與計時工具

所有 logger 皆掛在 "dialectpin" 之下，函式庫本身預設不輸出任何東西，
由使用者透過 verbose 參數或標準 logging 設定決定是否顯示。

使用方式:
    from dialectpin import enable_debug_logging
    enable_debug_logging()

    # 或直接使用標準 logging
    import logging
    logging.getLogger("dialectpin").setLevel(logging.DEBUG)
"""

import functools
import logging
import sys
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "dialectpin"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 dialectpin 子 logger

    Args:
        name: 子模組名稱（如 "engine" 或 "dictionary.table"），
              已帶有 "dialectpin." 前綴的名稱會原樣使用

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為 dialectpin logger 掛上 stderr handler（重複呼叫不會重複掛載）

    Args:
        level: 日誌等級
        fmt: 日誌格式

    Returns:
        logging.Logger: 根 logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    has_stream = any(getattr(h, "_dialectpin_stream", False) for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        handler._dialectpin_stream = True
        logger.addHandler(handler)

    for handler in logger.handlers:
        if getattr(handler, "_dialectpin_stream", False):
            handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌（其餘模組維持原等級）"""
    setup_logger(level=logging.getLogger(ROOT_LOGGER_NAME).getEffectiveLevel())
    timing_logger = logging.getLogger(TIMING_LOGGER_NAME)
    timing_logger.setLevel(logging.DEBUG)
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        if getattr(handler, "_dialectpin_stream", False):
            handler.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時 context manager

    離開區塊時把耗時寫入 logger，並呼叫可選的 callback。

    範例:
        >>> with TimingContext("DictionaryTable.build", logger):
        ...     build()
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> "TimingContext":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self.start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 操作名稱，預設為函式的 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logging.getLogger(TIMING_LOGGER_NAME), level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
