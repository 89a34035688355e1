"""
Letter Catalog
==============

Static, read-only metadata for the 52 Latin letters.

Design:
- One LetterSpec per glyph, built once at import
- Category membership is a table (data), not branching code
- Misconfiguration fails at import / validation time, never mid-grading
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional


class LetterCatalogError(ValueError):
    """Raised when the letter catalog is inconsistent or a letter is unknown."""


class LetterCase(str, Enum):
    UPPER = "upper"
    LOWER = "lower"


class LetterCategory(str, Enum):
    """Positional category deciding which band rules apply."""
    CAPITAL = "capital"
    ASCENDER = "ascender"
    DOT_ASCENDER = "dot_ascender"
    DESCENDER = "descender"
    DEFAULT = "default"


@dataclass(frozen=True)
class LetterSpec:
    """
    Immutable per-letter metadata.

    Attributes:
        char: The glyph (single Latin letter)
        case: Upper or lower case
        category: Positional category
        min_height_ratio: Per-letter override of the size-gate height
                          floor (fraction of canvas height)
    """

    char: str
    case: LetterCase
    category: LetterCategory
    min_height_ratio: Optional[float] = None

    def __post_init__(self):
        """Validate letter metadata."""
        if len(self.char) != 1 or self.char not in string.ascii_letters:
            raise LetterCatalogError(f"LetterSpec char must be one Latin letter, got {self.char!r}")

        case = LetterCase(self.case)
        category = LetterCategory(self.category)
        object.__setattr__(self, "case", case)
        object.__setattr__(self, "category", category)

        expected_case = LetterCase.UPPER if self.char.isupper() else LetterCase.LOWER
        if case is not expected_case:
            raise LetterCatalogError(f"Letter {self.char!r} declared {case.value}, expected {expected_case.value}")

        if (category is LetterCategory.CAPITAL) != (case is LetterCase.UPPER):
            raise LetterCatalogError(
                f"Letter {self.char!r}: capital category is reserved for uppercase letters"
            )

        if self.min_height_ratio is not None and not 0.0 < self.min_height_ratio < 1.0:
            raise LetterCatalogError(
                f"Letter {self.char!r}: min_height_ratio must be in (0, 1), got {self.min_height_ratio}"
            )

    @property
    def is_uppercase(self) -> bool:
        return self.case is LetterCase.UPPER


LOWERCASE_CATEGORIES: Mapping[LetterCategory, str] = {
    LetterCategory.ASCENDER: "bdfhkl",
    LetterCategory.DOT_ASCENDER: "ijt",
    LetterCategory.DESCENDER: "gpqy",
    LetterCategory.DEFAULT: "acemnorsuvwxz",
}

# Glyphs with thin or short profiles get a lower size-gate height floor.
THIN_LETTERS = "ijtl"
THIN_MIN_HEIGHT_RATIO = 0.03


def validate_catalog(specs: Iterable[LetterSpec]) -> Dict[str, LetterSpec]:
    """
    Check a catalog covers each of the 52 letters exactly once.

    Returns:
        Mapping char -> LetterSpec

    Raises:
        LetterCatalogError: On duplicates, gaps or foreign glyphs
    """
    catalog: Dict[str, LetterSpec] = {}
    for spec in specs:
        if spec.char in catalog:
            raise LetterCatalogError(f"Duplicate catalog entry for {spec.char!r}")
        catalog[spec.char] = spec

    missing = sorted(set(string.ascii_letters) - set(catalog))
    if missing:
        raise LetterCatalogError(f"Catalog is missing letters: {''.join(missing)}")
    return catalog


def build_catalog(
    lowercase_categories: Mapping[LetterCategory, str] = LOWERCASE_CATEGORIES,
    thin_letters: str = THIN_LETTERS,
) -> Dict[str, LetterSpec]:
    """Build and validate the catalog from the category table."""
    specs = [
        LetterSpec(char=c, case=LetterCase.UPPER, category=LetterCategory.CAPITAL)
        for c in string.ascii_uppercase
    ]
    for category, letters in lowercase_categories.items():
        if LetterCategory(category) is LetterCategory.CAPITAL:
            raise LetterCatalogError("Lowercase table cannot use the capital category")
        for c in letters:
            specs.append(LetterSpec(
                char=c,
                case=LetterCase.LOWER,
                category=category,
                min_height_ratio=THIN_MIN_HEIGHT_RATIO if c in thin_letters else None,
            ))
    return validate_catalog(specs)


LETTER_CATALOG: Dict[str, LetterSpec] = build_catalog()


def get_letter_spec(letter: str) -> LetterSpec:
    """
    Look up a letter.

    Raises:
        LetterCatalogError: If the letter is not one of the 52 Latin letters
    """
    try:
        return LETTER_CATALOG[letter]
    except (KeyError, TypeError):
        raise LetterCatalogError(f"Unknown letter: {letter!r}")
