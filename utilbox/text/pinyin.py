"""Pinyin classification and grouping for Chinese text.

Text is bucketed by the first letter of the pinyin reading of its first
character. Pinyin syllables never start with ``i``, ``u`` or ``v``, which
leaves 23 buckets::

    abcdefghjklmnopqrstwxyz

Readings come from :mod:`pypinyin`.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, List, Tuple, TypeVar

from pypinyin import Style, lazy_pinyin

from utilbox.core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ZH_LETTERS = "abcdefghjklmnopqrstwxyz"

# CJK unified ideographs (basic, extensions A-G) and compatibility ideographs
_HAN_RE = re.compile(
    "[\u3007\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003134f]"
)


@dataclass
class ZhGroupItem(Generic[T]):
    letter: str
    members: List[T] = field(default_factory=list)


def is_han(char: str) -> bool:
    return bool(char) and _HAN_RE.match(char) is not None


def zh_type(source: str) -> str:
    """Return the pinyin bucket letter of ``source``.

    * ``""`` when ``source`` does not start with a Chinese character.
    * ``source`` itself when no reading is known for its first character;
      a warning is logged in that case.

    >>> zh_type("北京"), zh_type("上海"), zh_type("abc")
    ('b', 's', '')
    """

    if not source or not is_han(source[0]):
        return ""

    initials = lazy_pinyin(source[0], style=Style.FIRST_LETTER, errors="ignore")
    initial = initials[0][:1].lower() if initials and initials[0] else ""
    if not ("a" <= initial <= "z"):
        logger.warning("No pinyin reading known for %r; leaving it unclassified.", source[0])
        return source

    return ZH_LETTERS[bisect_right(ZH_LETTERS, initial) - 1]


def pinyin_sort_key(text: str) -> Tuple[Tuple[str, ...], str]:
    """Sort key ordering Chinese text by its pinyin reading."""
    return tuple(p.lower() for p in lazy_pinyin(text)), text


def zh_group(items: Iterable[T], get_zh: Callable[[T], str]) -> List[ZhGroupItem[T]]:
    """Sort ``items`` by pinyin and group them by bucket letter.

    Args:
        items: Values to group. Not modified.
        get_zh: Extracts the text used for sorting and classification.

    Returns:
        One :class:`ZhGroupItem` per letter of :data:`ZH_LETTERS`, always in
        that order, including empty groups. Items whose text has no bucket
        (non-Chinese or unknown first character) are left out.
    """

    ordered = sorted(items, key=lambda item: pinyin_sort_key(get_zh(item)))

    groups = {letter: ZhGroupItem(letter=letter) for letter in ZH_LETTERS}
    for item in ordered:
        group = groups.get(zh_type(get_zh(item)))
        if group is not None:
            group.members.append(item)

    return [groups[letter] for letter in ZH_LETTERS]
