"""共用 fixtures：小型詞典與對照表簡繁轉換器"""

import pytest

from dialectpin import DictionaryEntry, DictionaryTable, MappingNormalizer, Reading

# 繁 -> 簡
VARIANT_CHARS = {
    "話": "话",
    "讀": "读",
    "語": "语",
    "興": "兴",
    "學": "学",
    "書": "书",
}

SAMPLE_DICT = "\n".join(
    [
        "# 莆仙話測試詞典",
        "莆\tpuo\t文",
        "仙\tsieng\t文",
        "莆仙\tpuosieng\t白",
        "白\tpa\t白",
        "白\tpeh\t文",
        "白讀\tpahthak\t",
        "興化\thinghua\t地名",
        "讀\tthak\t",
        "书\tcy\t",
        "無效行",
        "",
    ]
)


@pytest.fixture
def normalizer():
    return MappingNormalizer(VARIANT_CHARS)


@pytest.fixture
def table():
    return DictionaryTable.build([(SAMPLE_DICT, "sample.dict.yaml")])


@pytest.fixture
def make_table():
    """{詞: [(讀音, 風格), ...]} -> DictionaryTable（直接建表，不經過解析）"""

    def _make(mapping):
        data = {
            word: DictionaryEntry(word=word, readings=tuple(Reading(v, s) for v, s in readings))
            for word, readings in mapping.items()
        }
        return DictionaryTable(data)

    return _make


@pytest.fixture
def sample_sources():
    return [(SAMPLE_DICT, "sample.dict.yaml")]
