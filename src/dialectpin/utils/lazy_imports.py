"""
延遲導入與依賴檢查

簡繁轉換依賴 hanziconv，只在第一次真正需要轉換時才載入。
"""

import importlib.util

SCRIPT_INSTALL_HINT = (
    "缺少簡繁轉換依賴。請執行:\n"
    "  pip install hanziconv\n"
    "或重新安裝本套件:\n"
    "  pip install dialectpin"
)

_hanziconv = None


def is_script_conversion_available() -> bool:
    """檢查 hanziconv 是否可用（不實際載入）"""
    return importlib.util.find_spec("hanziconv") is not None


def check_script_dependencies() -> None:
    """
    檢查簡繁轉換依賴

    Raises:
        ImportError: 缺少 hanziconv 時，附帶安裝提示
    """
    if not is_script_conversion_available():
        raise ImportError(SCRIPT_INSTALL_HINT)


def get_hanziconv():
    """延遲載入 hanziconv.HanziConv"""
    global _hanziconv

    if _hanziconv is not None:
        return _hanziconv

    try:
        from hanziconv import HanziConv
    except ImportError as exc:
        raise ImportError(SCRIPT_INSTALL_HINT) from exc

    _hanziconv = HanziConv
    return _hanziconv
