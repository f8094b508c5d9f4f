"""Element category lookups.

The traverser never consults the tables in :mod:`html5serial.constants`
directly. It asks a classifier, so tests and callers can swap in their own
notion of which elements are void, block-level or raw text.
"""

from __future__ import annotations

import enum
from collections.abc import Collection, Mapping

from .constants import BLOCK_ELEMENTS, RAW_TEXT_ELEMENTS, RCDATA_ELEMENTS, VOID_ELEMENTS


class Category(enum.Enum):
    VOID = "void"
    BLOCK = "block"
    RAW_TEXT = "raw-text"
    RCDATA = "rcdata"


class ElementClassifier:
    """Answer ``is_a(name, category)`` from a fixed table.

    Names are compared ASCII-case-insensitively. Categories missing from the
    table contain no elements.
    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[Category, Collection[str]]) -> None:
        self._table: dict[Category, frozenset[str]] = {
            category: frozenset(name.lower() for name in names) for category, names in table.items()
        }

    @classmethod
    def from_defaults(cls) -> ElementClassifier:
        return cls({
            Category.VOID: VOID_ELEMENTS,
            Category.BLOCK: BLOCK_ELEMENTS,
            Category.RAW_TEXT: RAW_TEXT_ELEMENTS,
            Category.RCDATA: RCDATA_ELEMENTS,
        })

    def is_a(self, name: str, category: Category) -> bool:
        names = self._table.get(category)
        if not names or not name:
            return False
        return name.lower() in names

    def __repr__(self) -> str:
        sizes = ", ".join(f"{category.name}={len(names)}" for category, names in self._table.items())
        return f"ElementClassifier({sizes})"


DEFAULT_CLASSIFIER = ElementClassifier.from_defaults()


def is_void(name: str) -> bool:
    return DEFAULT_CLASSIFIER.is_a(name, Category.VOID)


def is_block(name: str) -> bool:
    return DEFAULT_CLASSIFIER.is_a(name, Category.BLOCK)


def is_raw_text(name: str) -> bool:
    """True for elements whose text content is written without escaping."""
    return DEFAULT_CLASSIFIER.is_a(name, Category.RAW_TEXT) or DEFAULT_CLASSIFIER.is_a(name, Category.RCDATA)
