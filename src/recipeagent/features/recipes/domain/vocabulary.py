"""
Static vocabulary used by the name resolver.

``COMMON_TRANSLATIONS`` is the fast path for the most frequent terms and is
never evicted. ``KEYWORD_FALLBACKS`` is scanned in order when the generative
translation is unavailable; the first matching substring wins.
"""
from typing import Dict, Tuple

COMMON_TRANSLATIONS: Dict[str, str] = {
    "鸡蛋": "eggs",
    "西红柿": "tomato",
    "土豆": "potato",
    "猪肉": "pork",
    "牛肉": "beef",
    "鸡肉": "chicken",
    "鱼肉": "fish",
    "米饭": "rice",
    "面条": "noodles",
    "豆腐": "tofu",
}

KEYWORD_FALLBACKS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("鸡蛋", "炒蛋"), "scrambled eggs"),
    (("土豆",), "potato"),
    (("鸡肉", "鸡"), "chicken"),
    (("牛肉",), "beef"),
    (("猪肉", "肉"), "pork"),
    (("鱼",), "fish"),
    (("豆腐",), "tofu"),
    (("面条", "面"), "noodles"),
    (("米饭", "饭"), "rice"),
    (("西红柿", "番茄"), "tomato"),
    (("青菜", "菜"), "vegetables"),
)

# CJK Unified Ideographs
SOURCE_SCRIPT_RANGE = ("一", "鿿")
