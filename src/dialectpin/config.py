"""
引擎配置

EngineConfig 把建立 DialectEngine 時常一起出現的設定收在一起：
日誌、計時回呼、預設的文讀 / 白讀偏好，以及詞典格式。

使用方式:
    from dialectpin import DialectEngine, EngineConfig

    config = EngineConfig(preference="colloquial")
    engine = DialectEngine(sources=[...], config=config)
    engine.lookup("白")  # 白讀排在前面

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("dialectpin").setLevel(logging.DEBUG)
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .dictionary.config import DictionaryConfig
from .segmentation.sorter import Preference, normalize_preference


@dataclass
class EngineConfig:
    """
    引擎配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        preference: 查詢時預設的讀音風格偏好（"literary" / "colloquial"），None 保持詞典順序
        dictionary_config: 建置 / 重新載入詞典時使用的格式配置

    使用範例:
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        engine = DialectEngine(config=EngineConfig(verbose=True, on_timing=my_callback))
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    preference: Preference = None
    dictionary_config: Optional[DictionaryConfig] = None

    def __post_init__(self):
        self.preference = normalize_preference(self.preference)
