"""
讀音查詢範例

展示如何建立詞典表、切分句子、依文讀 / 白讀偏好排序，
以及使用 on_timing / on_event 觀察引擎行為。
"""

from dialectpin import DialectEngine, MappingNormalizer

DEMO_DICT = """\
# 示範用詞典（Rime 表頭會被忽略）
---
name: demo
...
莆\tpuo\t文
仙\tsieng\t文
莆仙\tpuosieng\t白
白\tpa\t白
白\tpeh\t文
白讀\tpahthak
興化\thinghua\t地名
"""


def demo_lookup():
    print("=" * 60)
    print("範例 1: 切分與讀音")
    print("=" * 60)

    engine = DialectEngine(
        sources=[(DEMO_DICT, "demo.dict.yaml")],
        normalizer=MappingNormalizer({"讀": "读", "興": "兴", "話": "话"}),
    )

    for segment in engine.lookup("兴化人讲莆仙话，白读"):
        readings = " / ".join(r.value for r in segment.readings) or "?"
        via = f" ({segment.matched_word})" if segment.matched_via_variant else ""
        print(f"{segment.text}{via}: {readings}")
    print()


def demo_preference():
    print("=" * 60)
    print("範例 2: 文讀 / 白讀偏好")
    print("=" * 60)

    engine = DialectEngine(
        sources=[(DEMO_DICT, "demo.dict.yaml")],
        normalizer=MappingNormalizer({}),
    )
    for preference in (None, "literary", "colloquial"):
        segment = engine.lookup("白", preference=preference)[0]
        print(f"{preference or '詞典順序'}: {[r.value for r in segment.readings]}")
    print()


def demo_callbacks():
    print("=" * 60)
    print("範例 3: 計時與載入事件")
    print("=" * 60)

    def on_timing(operation, elapsed):
        print(f"  [timing] {operation}: {elapsed * 1000:.2f}ms")

    def on_event(event):
        print(f"  [event] {event['type']} {event.get('source')}")

    engine = DialectEngine(
        sources=[(b"\xff\xfe", "broken.txt"), (DEMO_DICT, "demo.dict.yaml")],
        normalizer=MappingNormalizer({}),
        on_timing=on_timing,
        on_event=on_event,
    )
    engine.lookup("莆仙")
    print(f"stats: {engine.get_stats()}")


if __name__ == "__main__":
    demo_lookup()
    demo_preference()
    demo_callbacks()
