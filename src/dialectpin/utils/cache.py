"""
LRU 緩存工具

提供以「實例」為單位的方法緩存裝飾器與緩存統計。

用法：
    from dialectpin.utils.cache import cached_method, get_cache_stats

    class MyNormalizer:
        @cached_method(maxsize=4096)
        def to_traditional(self, text: str) -> str:
            ...
"""

import threading
import weakref
from functools import lru_cache, wraps
from typing import Any, Callable, Dict, Optional


# 全域緩存統計
_cache_stats_lock = threading.Lock()
_cache_stats: Dict[str, Dict[str, int]] = {}


def cached_method(maxsize: int = 1000):
    """
    為類方法添加 LRU 緩存的裝飾器

    每個實例擁有自己的 LRU 緩存，不同實例之間的結果不會互相污染
    （例如兩個對照表不同的 MappingNormalizer）。統計則以方法為單位彙總。

    Args:
        maxsize: 每個實例的最大緩存項數量（預設 1000）

    範例：
        >>> class MyClass:
        ...     @cached_method(maxsize=100)
        ...     def slow_method(self, x):
        ...         return x * 2
        >>>
        >>> obj = MyClass()
        >>> obj.slow_method(5)
        10
        >>> obj.slow_method(5)  # 從緩存返回
        10
    """

    def decorator(func: Callable) -> Callable:
        cache_key = f"{func.__module__}.{func.__qualname__}"

        with _cache_stats_lock:
            _cache_stats[cache_key] = {
                "hits": 0,
                "misses": 0,
                "size": 0,
                "maxsize": maxsize,
            }

        per_instance: "weakref.WeakKeyDictionary[Any, Callable]" = weakref.WeakKeyDictionary()
        per_instance_lock = threading.Lock()

        def _cache_for(instance) -> Callable:
            with per_instance_lock:
                cached_func = per_instance.get(instance)
                if cached_func is None:
                    instance_ref = weakref.ref(instance)

                    @lru_cache(maxsize=maxsize)
                    def cached_func(*args, **kwargs):
                        return func(instance_ref(), *args, **kwargs)

                    per_instance[instance] = cached_func
                return cached_func

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            cached_func = _cache_for(self)
            before = cached_func.cache_info()
            try:
                result = cached_func(*args, **kwargs)
            except TypeError:
                # 參數不可哈希，直接調用原函數
                with _cache_stats_lock:
                    _cache_stats[cache_key]["misses"] += 1
                return func(self, *args, **kwargs)

            after = cached_func.cache_info()
            with _cache_stats_lock:
                if after.hits > before.hits:
                    _cache_stats[cache_key]["hits"] += 1
                else:
                    _cache_stats[cache_key]["misses"] += 1
                _cache_stats[cache_key]["size"] = after.currsize
            return result

        def cache_clear() -> None:
            with per_instance_lock:
                for cached_func in list(per_instance.values()):
                    cached_func.cache_clear()
            with _cache_stats_lock:
                _cache_stats[cache_key]["size"] = 0

        def cache_size() -> int:
            with per_instance_lock:
                return sum(f.cache_info().currsize for f in per_instance.values())

        wrapper.cache_clear = cache_clear
        wrapper.cache_size = cache_size
        wrapper.cache_key = cache_key

        return wrapper

    return decorator


def get_cache_stats(method_name: Optional[str] = None) -> Dict[str, Any]:
    """
    獲取緩存統計信息

    Args:
        method_name: 方法名稱片段（如 "to_traditional"），
                    為 None 時返回所有緩存的總覽

    Returns:
        Dict: 指定方法時包含 hits / misses / hit_rate / size / maxsize；
              總覽時包含 overall_hit_rate / total_hits / total_misses / total_calls / methods
    """
    with _cache_stats_lock:
        if method_name:
            total_hits = 0
            total_misses = 0
            total_size = 0
            maxsize = 0
            matched_methods = []

            for key, stats in _cache_stats.items():
                if method_name in key:
                    total_hits += stats["hits"]
                    total_misses += stats["misses"]
                    total_size += stats["size"]
                    maxsize = max(maxsize, stats["maxsize"])
                    matched_methods.append(key)

            if not matched_methods:
                return {}
            total = total_hits + total_misses
            return {
                "methods": matched_methods,
                "hits": total_hits,
                "misses": total_misses,
                "hit_rate": total_hits / total if total > 0 else 0.0,
                "size": total_size,
                "maxsize": maxsize,
            }

        total_hits = sum(s["hits"] for s in _cache_stats.values())
        total_misses = sum(s["misses"] for s in _cache_stats.values())
        total_calls = total_hits + total_misses
        return {
            "overall_hit_rate": total_hits / total_calls if total_calls > 0 else 0.0,
            "total_hits": total_hits,
            "total_misses": total_misses,
            "total_calls": total_calls,
            "methods": {key: dict(stats) for key, stats in _cache_stats.items()},
        }


def reset_cache_stats() -> None:
    """重置緩存統計（用於測試隔離），不清除緩存內容"""
    with _cache_stats_lock:
        for key in _cache_stats:
            _cache_stats[key]["hits"] = 0
            _cache_stats[key]["misses"] = 0


def get_hit_rate(method_name: Optional[str] = None) -> float:
    """
    獲取緩存命中率（便捷函數）

    Args:
        method_name: 方法名稱，為 None 時返回總體命中率

    Returns:
        float: 命中率（0.0-1.0）
    """
    stats = get_cache_stats(method_name)
    if not stats:
        return 0.0
    if "hit_rate" in stats:
        return stats["hit_rate"]
    return stats.get("overall_hit_rate", 0.0)
