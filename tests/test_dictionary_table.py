"""
詞典表建置測試

驗證：
1. 行解析與跳過規則
2. 讀音風格判定（來源檔名 / 釋義標記）
3. 多來源合併與 (value, style) 去重
4. 單一來源失敗不影響其他來源
5. 唯讀
"""

import pytest

from dialectpin import (
    DictionaryConfig,
    DictionaryEntry,
    DictionaryTable,
    Reading,
    ReadingStyle,
    SourceReadError,
    build_table,
)

LIT = ReadingStyle.LITERARY
COL = ReadingStyle.COLLOQUIAL
UNK = ReadingStyle.UNKNOWN
ALT = ReadingStyle.ALTERNATE_SOURCE


def values(entry):
    return [(r.value, r.style) for r in entry.readings]


class TestParsing:
    def test_basic_entries(self, table):
        assert values(table["莆"]) == [("puo", LIT)]
        assert values(table["莆仙"]) == [("puosieng", COL)]
        assert values(table["白"]) == [("pa", COL), ("peh", LIT)]
        assert values(table["興化"]) == [("hinghua", UNK)]
        assert table["興化"].definition == "地名"

    def test_comment_blank_and_malformed_lines_skipped(self, table):
        assert "# 莆仙話測試詞典" not in table
        assert "無效行" not in table
        assert table.report.lines_skipped == 1
        assert len(table) == 8

    def test_definition_keeps_extra_tabs(self):
        table = DictionaryTable.build([("莆仙\tpuosieng\t地名\t方言\n", "a.txt")])
        assert table["莆仙"].definition == "地名\t方言"

    def test_definition_optional(self):
        table = DictionaryTable.build([("仙\tsieng\n", "a.txt")])
        assert table["仙"].definition == ""
        assert values(table["仙"]) == [("sieng", UNK)]

    def test_rime_header_is_ignored(self):
        text = "\n".join(
            [
                "# Rime dictionary",
                "---",
                "name: pouleng",
                "version: \"1.0\"",
                "sort: by_weight",
                "...",
                "莆\tpuo\t文",
            ]
        )
        table = DictionaryTable.build([(text, "Pouleng.dict.yaml")])
        assert list(table) == ["莆"]
        assert table.report.lines_skipped == 0

    def test_bytes_source_with_bom(self):
        data = "\ufeff仙\tsieng\t文\n".encode("utf-8")
        table = DictionaryTable.build([(data, "bom.txt")])
        assert values(table["仙"]) == [("sieng", LIT)]

    def test_crlf_line_endings(self):
        table = DictionaryTable.build([("莆\tpuo\t文\r\n仙\tsieng\t白\r\n", "crlf.txt")])
        assert values(table["莆"]) == [("puo", LIT)]
        assert values(table["仙"]) == [("sieng", COL)]

    def test_unicode_line_separator_stays_in_definition(self):
        table = DictionaryTable.build([("莆\tpuo\t地名\u2028白讀\n", "a.txt")])
        assert table["莆"].definition == "地名\u2028白讀"
        assert values(table["莆"]) == [("puo", COL)]
        assert table.report.lines_skipped == 0

    def test_stray_terminator_does_not_drop_entries(self):
        table = DictionaryTable.build([("莆\tpuo\t文\n...\n仙\tsieng\t文\n", "plain.txt")])
        assert list(table) == ["莆", "仙"]
        assert table.report.lines_skipped == 1


class TestStyles:
    def test_source_tag_assigns_single_style(self):
        table = DictionaryTable.build([("莆\tpuo\t白\n", "pouleng.literary.txt")])
        # 來源檔名優先於釋義標記
        assert values(table["莆"]) == [("puo", LIT)]

    def test_alternate_source(self):
        table = DictionaryTable.build([("莆\tpou\t\n", "hinghwa.extra.dict.yaml")])
        assert values(table["莆"]) == [("pou", ALT)]

    def test_literary_marker_checked_before_colloquial(self):
        table = DictionaryTable.build([("白\tpeh\t文白異讀\n", "a.txt")])
        assert values(table["白"]) == [("peh", LIT)]

    def test_custom_markers(self):
        config = DictionaryConfig(literary_markers=("(lit)",), colloquial_markers=("(col)",))
        text = "莆\tpuo\t(lit)\n莆\tpou\t(col)\n莆\tpo\t文\n"
        table = DictionaryTable.build([(text, "a.txt")], config=config)
        assert values(table["莆"]) == [("puo", LIT), ("pou", COL), ("po", UNK)]

    def test_custom_comment_prefix(self):
        config = DictionaryConfig(comment_prefix="//")
        table = DictionaryTable.build([("// 註解\t行\n莆\tpuo\n", "a.txt")], config=config)
        assert list(table) == ["莆"]


class TestMerging:
    def test_readings_unioned_across_files(self):
        first = "莆\tpuo\t文\n莆仙\tpuosieng\t第一個釋義\n"
        second = "莆\tpuo\t文\n莆\tpou\t白\n莆仙\tpuosieng\t第二個釋義\n"
        table = build_table([(first, "a.txt"), (second, "b.txt")])

        assert values(table["莆"]) == [("puo", LIT), ("pou", COL)]
        assert values(table["莆仙"]) == [("puosieng", UNK)]
        assert table["莆仙"].definition == "第一個釋義"
        assert table["莆"].sources == ("a.txt", "b.txt")

    def test_same_value_different_style_kept(self):
        text = "白\tpa\t文\n白\tpa\t白\n白\tpa\t文\n"
        table = DictionaryTable.build([(text, "a.txt")])
        assert values(table["白"]) == [("pa", LIT), ("pa", COL)]

    def test_no_duplicate_readings_invariant(self, table):
        for entry in table.values():
            keys = [r.key for r in entry.readings]
            assert len(keys) == len(set(keys))

    def test_iteration_follows_first_appearance(self):
        table = build_table([("乙\tb\n甲\ta\n", "a.txt"), ("丙\tc\n乙\tbb\n", "b.txt")])
        assert list(table) == ["乙", "甲", "丙"]


class TestFailures:
    def test_missing_file_does_not_abort_build(self, tmp_path):
        good = tmp_path / "good.dict.yaml"
        good.write_text("莆\tpuo\t文\n", encoding="utf-8")
        missing = tmp_path / "missing.dict.yaml"

        table = DictionaryTable.from_files([missing, good])

        assert list(table) == ["莆"]
        assert table.report.sources_loaded == ["good.dict.yaml"]
        assert table.report.failed_sources == ["missing.dict.yaml"]
        assert not table.report.ok
        failure = table.report.failures[0]
        assert isinstance(failure, SourceReadError)
        assert isinstance(failure.cause, FileNotFoundError)

    def test_undecodable_bytes_reported(self):
        table = DictionaryTable.build([(b"\xff\xfe\xfa", "broken.txt"), ("仙\tsieng\n", "ok.txt")])
        assert list(table) == ["仙"]
        assert table.report.failed_sources == ["broken.txt"]

    def test_events(self, tmp_path):
        events = []
        DictionaryTable.build(
            [(tmp_path / "nope.txt", "nope.txt"), ("仙\tsieng\n壞行\n", "ok.txt")],
            on_event=events.append,
        )
        types = [e["type"] for e in events]
        assert types == ["source_failed", "line_skipped", "source_loaded"]
        assert events[0]["exception_type"] == "FileNotFoundError"
        assert events[1]["line"] == "壞行"
        assert events[2]["entries"] == 1

    def test_failing_event_handler_is_contained(self):
        def handler(event):
            raise RuntimeError("boom")

        table = DictionaryTable.build([("仙\tsieng\n", "ok.txt")], on_event=handler)
        assert "仙" in table

    def test_empty_sources(self):
        table = DictionaryTable.build([])
        assert len(table) == 0
        assert table.max_word_length == 0


class TestImmutability:
    def test_table_is_read_only(self, table):
        with pytest.raises(TypeError):
            table["新"] = None
        with pytest.raises(TypeError):
            table._entries["新"] = None

    def test_entries_are_frozen(self, table):
        with pytest.raises(AttributeError):
            table["莆"].word = "仙"

    def test_max_word_length(self, table):
        assert table.max_word_length == 2


class TestDirectConstruction:
    def test_valid_entries_accepted(self):
        entry = DictionaryEntry("仙", (Reading("sieng", LIT), Reading("sieng", COL)))
        table = DictionaryTable({"仙": entry})
        assert table["仙"] is entry
        assert table.report.entries == 1

    def test_key_must_match_word(self):
        with pytest.raises(ValueError):
            DictionaryTable({"莆": DictionaryEntry("仙", (Reading("sieng", LIT),))})

    def test_duplicate_readings_rejected(self):
        entry = DictionaryEntry("仙", (Reading("sieng", LIT), Reading("sieng", LIT)))
        with pytest.raises(ValueError):
            DictionaryTable({"仙": entry})
