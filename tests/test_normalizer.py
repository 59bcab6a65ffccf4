"""
簡繁轉換器測試

- MappingNormalizer: 對照表實作
- HanziConvNormalizer: hanziconv 後端（只驗證常見字）
"""

import pytest

from dialectpin import HanziConvNormalizer, MappingNormalizer, ScriptNormalizer, is_simplified
from dialectpin.utils.cache import get_cache_stats, reset_cache_stats
from dialectpin.utils.lazy_imports import (
    SCRIPT_INSTALL_HINT,
    check_script_dependencies,
    get_hanziconv,
    is_script_conversion_available,
)


class TestMappingNormalizer:
    def setup_method(self):
        self.normalizer = MappingNormalizer({"話": "话", "讀": "读", "興": "兴"})

    def test_satisfies_protocol(self):
        assert isinstance(self.normalizer, ScriptNormalizer)

    def test_conversions(self):
        assert self.normalizer.to_traditional("莆仙话") == "莆仙話"
        assert self.normalizer.to_simplified("興化話") == "兴化话"

    def test_unmapped_characters_kept(self):
        assert self.normalizer.to_traditional("abc 仙") == "abc 仙"
        assert self.normalizer.to_simplified("") == ""

    def test_is_simplified_heuristic(self):
        assert is_simplified(self.normalizer, "兴化话")
        assert not is_simplified(self.normalizer, "興化話")
        # 簡繁同形的字也會被判為簡體
        assert self.normalizer.is_simplified("莆仙")

    def test_round_trip_is_stable(self):
        once = self.normalizer.to_simplified(self.normalizer.to_traditional("读书话"))
        twice = self.normalizer.to_simplified(self.normalizer.to_traditional(once))
        assert once == twice

    def test_explicit_reverse_mapping(self):
        normalizer = MappingNormalizer({"乾": "干", "幹": "干"}, simplified_to_traditional={"干": "幹"})
        assert normalizer.to_traditional("干") == "幹"

    def test_inferred_reverse_mapping_takes_first(self):
        normalizer = MappingNormalizer({"乾": "干", "幹": "干"})
        assert normalizer.to_traditional("干") == "乾"

    def test_rejects_multi_character_keys(self):
        with pytest.raises(ValueError):
            MappingNormalizer({"興化": "兴化"})


class TestHanziConvNormalizer:
    def setup_method(self):
        pytest.importorskip("hanziconv")
        self.normalizer = HanziConvNormalizer()

    def test_satisfies_protocol(self):
        assert isinstance(self.normalizer, ScriptNormalizer)

    def test_common_characters(self):
        assert self.normalizer.to_traditional("话") == "話"
        assert self.normalizer.to_traditional("读书") == "讀書"
        assert self.normalizer.to_simplified("學語") == "学语"

    def test_empty(self):
        assert self.normalizer.to_traditional("") == ""
        assert self.normalizer.to_simplified("") == ""

    def test_conversions_are_cached(self):
        self.normalizer.to_traditional.cache_clear()
        reset_cache_stats()

        for _ in range(10):
            self.normalizer.to_traditional("莆仙话")

        stats = get_cache_stats("HanziConvNormalizer.to_traditional")
        assert stats["misses"] == 1
        assert stats["hits"] == 9

    def test_instances_do_not_share_cache_entries(self):
        other = HanziConvNormalizer()
        self.normalizer.to_simplified("讀")
        other.to_simplified("讀")
        assert self.normalizer.to_simplified.cache_size() >= 2


class TestScriptDependencies:
    def test_available_when_installed(self):
        pytest.importorskip("hanziconv")
        assert is_script_conversion_available()
        check_script_dependencies()
        assert get_hanziconv() is get_hanziconv()

    def test_install_hint_names_package(self):
        assert "pip install hanziconv" in SCRIPT_INSTALL_HINT
