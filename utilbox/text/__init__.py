from .pinyin import ZH_LETTERS, ZhGroupItem, zh_group, zh_type
from .strings import string_limit

__all__ = ["string_limit", "ZH_LETTERS", "ZhGroupItem", "zh_type", "zh_group"]
