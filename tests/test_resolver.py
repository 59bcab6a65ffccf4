"""讀音解析測試"""

import pytest

from dialectpin import DictionaryEntry, Provenance, Reading, ReadingResolver, ReadingStyle
from dialectpin.segmentation import merge_readings, summarize_style, tag_readings

LIT = ReadingStyle.LITERARY
COL = ReadingStyle.COLLOQUIAL
UNK = ReadingStyle.UNKNOWN


class TestReadingResolver:
    def setup_method(self):
        self.resolver = ReadingResolver()
        self.literal = DictionaryEntry("读", (Reading("tha", COL),))
        self.variant = DictionaryEntry("讀", (Reading("thak", LIT), Reading("tha", COL)))

    def test_literal_only(self):
        resolution = self.resolver.resolve(self.literal)
        assert resolution.matched_word == "读"
        assert resolution.provenance is Provenance.LITERAL
        assert [r.provenance for r in resolution.readings] == [Provenance.LITERAL]

    def test_variant_only(self):
        resolution = self.resolver.resolve(None, self.variant, Provenance.SIMPLIFIED)
        assert resolution.matched_word == "讀"
        assert resolution.provenance is Provenance.SIMPLIFIED
        assert all(r.from_simplified and not r.from_traditional for r in resolution.readings)

    def test_union_keeps_literal_word(self):
        resolution = self.resolver.resolve(self.literal, self.variant, Provenance.TRADITIONAL)
        assert resolution.matched_word == "读"
        assert [(r.value, r.from_traditional) for r in resolution.readings] == [
            ("tha", False),
            ("thak", True),
        ]

    def test_no_match(self):
        resolution = self.resolver.resolve(None, None)
        assert not resolution
        assert resolution.readings == []
        assert resolution.matched_word is None

    def test_table_entries_are_not_mutated(self):
        self.resolver.resolve(None, self.variant, Provenance.TRADITIONAL)
        assert not any(r.from_traditional for r in self.variant.readings)

    def test_variant_provenance_must_be_a_script(self):
        with pytest.raises(ValueError):
            self.resolver.resolve(None, self.variant, Provenance.LITERAL)


class TestHelpers:
    def test_tag_readings(self):
        tagged = tag_readings([Reading("a", LIT, from_simplified=True)], Provenance.TRADITIONAL)
        assert tagged[0].from_traditional and not tagged[0].from_simplified

    def test_merge_first_wins(self):
        merged = merge_readings(
            [Reading("a", LIT)],
            [Reading("a", LIT, from_traditional=True), Reading("a", COL), Reading("b")],
        )
        assert [(r.value, r.style, r.from_traditional) for r in merged] == [
            ("a", LIT, False),
            ("a", COL, False),
            ("b", UNK, False),
        ]

    @pytest.mark.parametrize(
        "styles, expected",
        [
            ([], None),
            ([UNK, ReadingStyle.ALTERNATE_SOURCE], None),
            ([LIT], LIT),
            ([COL, LIT, LIT], LIT),
            ([COL, LIT], COL),
            ([UNK, LIT, COL], LIT),
            ([COL, COL, LIT], COL),
        ],
    )
    def test_summarize_style(self, styles, expected):
        readings = [Reading(str(i), style) for i, style in enumerate(styles)]
        assert summarize_style(readings) is expected
