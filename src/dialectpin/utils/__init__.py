"""
工具模組

提供日誌、計時、緩存、延遲導入等通用工具。
"""

from .cache import cached_method, get_cache_stats, get_hit_rate, reset_cache_stats
from .lazy_imports import (
    SCRIPT_INSTALL_HINT,
    check_script_dependencies,
    is_script_conversion_available,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "log_timing",
    "TimingContext",
    "enable_debug_logging",
    "enable_timing_logging",

    # 緩存
    "cached_method",
    "get_cache_stats",
    "get_hit_rate",
    "reset_cache_stats",

    # 依賴檢查
    "is_script_conversion_available",
    "check_script_dependencies",
    "SCRIPT_INSTALL_HINT",
]
