"""
Band Rules
==========

Category-specific vertical-band rules, expressed as data.

Design:
- Each rule is a frozen dataclass carrying its own thresholds, failure
  tag and feedback message
- Thresholds are ``Level`` values (guide line + offset), resolved
  against the shared NotebookGuides at evaluation time
- A category is an ordered tuple of rules; the first violated rule wins
- Adding a category means adding a table entry, not a branch

Tolerances in CATEGORY_RULES are fixed contract values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Protocol, Tuple

from fourline_grading.geometry.guides import GuideLine, Level, NotebookGuides
from fourline_grading.schemas.result import FailZone
from fourline_grading.zones.catalog import LetterCatalogError, LetterCategory, LetterSpec
from fourline_grading.zones.stats import CloudStats

L1, L2, L3, L4 = GuideLine.L1, GuideLine.L2, GuideLine.L3, GuideLine.L4


class Edge(str, Enum):
    """Vertical edge of the point cloud."""
    TOP = "top"        # min_y
    BOTTOM = "bottom"  # max_y


class Side(str, Enum):
    """Page direction relative to a level (y grows downwards)."""
    ABOVE = "above"    # y < level
    BELOW = "below"    # y > level


class BandRule(Protocol):
    """Protocol for band rules (interface)."""

    fail_zone: FailZone
    reason: str

    def is_violated(self, stats: CloudStats, guides: NotebookGuides) -> bool:
        """True when the cloud breaks this rule."""
        ...


@dataclass(frozen=True)
class EdgeRule:
    """
    Fails when a cloud edge lies beyond a level.

    Example:
        EdgeRule(Edge.TOP, Side.BELOW, Level(L2, 0.06), ...)
        fails when min_y / H > L2 + 0.06 (starts too low).
    """

    edge: Edge
    side: Side
    level: Level
    fail_zone: FailZone
    reason: str

    def is_violated(self, stats: CloudStats, guides: NotebookGuides) -> bool:
        value = stats.min_y_ratio if self.edge is Edge.TOP else stats.max_y_ratio
        limit = self.level.resolve(guides)
        if self.side is Side.BELOW:
            return value > limit
        return value < limit


@dataclass(frozen=True)
class SpillRule:
    """Fails when more than ``max_fraction`` of points spill past a level."""

    side: Side
    level: Level
    max_fraction: float
    fail_zone: FailZone
    reason: str

    def is_violated(self, stats: CloudStats, guides: NotebookGuides) -> bool:
        limit = self.level.resolve(guides)
        if self.side is Side.BELOW:
            spilled = stats.fraction_below(limit)
        else:
            spilled = stats.fraction_above(limit)
        return spilled > self.max_fraction


@dataclass(frozen=True)
class OccupancyRule:
    """Fails when fewer than ``min_fraction`` of points sit inside [top, bottom]."""

    top: Level
    bottom: Level
    min_fraction: float
    fail_zone: FailZone
    reason: str

    def is_violated(self, stats: CloudStats, guides: NotebookGuides) -> bool:
        inside = stats.fraction_between(self.top.resolve(guides), self.bottom.resolve(guides))
        return inside < self.min_fraction


@dataclass(frozen=True)
class BodyHeightRule:
    """
    Fails when the cloud is shorter than ``min_ratio`` of a band's height.

    Compared in pixels: height < min_ratio * (bottom - top) * H.
    """

    top: GuideLine
    bottom: GuideLine
    min_ratio: float
    fail_zone: FailZone
    reason: str

    def is_violated(self, stats: CloudStats, guides: NotebookGuides) -> bool:
        band = (guides.position(self.bottom) - guides.position(self.top)) * stats.canvas_height
        return stats.height < band * self.min_ratio


@dataclass(frozen=True)
class SizeGate:
    """Minimum normalized bounding-box size."""

    min_width: float
    min_height: float

    def is_too_small(self, stats: CloudStats, min_height: Optional[float] = None) -> bool:
        floor = self.min_height if min_height is None else min_height
        return stats.width_ratio < self.min_width or stats.height_ratio < floor


@dataclass(frozen=True)
class CategoryRules:
    """Size gate, ordered band rules and success message of one category."""

    size_gate: SizeGate
    rules: Tuple[BandRule, ...]
    success_reason: str

    def first_violation(self, stats: CloudStats, guides: NotebookGuides) -> Optional[BandRule]:
        for rule in self.rules:
            if rule.is_violated(stats, guides):
                return rule
        return None


EMPTY_REASON = "Nothing written yet! Try writing the letter."
TOO_SMALL_REASON = "The letter is too small! Try writing it bigger."
TOO_LOW_REASON = "The letter goes down too far! Keep it higher."

CAPITAL_SIZE = SizeGate(min_width=0.15, min_height=0.18)
LOWERCASE_SIZE = SizeGate(min_width=0.05, min_height=0.05)

CAPITAL_SUCCESS = "Great job! You wrote the capital letter correctly."
LOWERCASE_SUCCESS = "Great job! You wrote the lowercase letter correctly."

CATEGORY_RULES: Mapping[LetterCategory, CategoryRules] = {
    LetterCategory.CAPITAL: CategoryRules(
        size_gate=CAPITAL_SIZE,
        rules=(
            EdgeRule(Edge.TOP, Side.BELOW, Level(L2, 0.06), FailZone.WRONG_AREA,
                     "Capital letters start at the top line! Write it higher."),
            EdgeRule(Edge.BOTTOM, Side.ABOVE, Level(L2, -0.02), FailZone.WRONG_AREA,
                     "The letter is too high! Bring it down to the red line."),
            SpillRule(Side.BELOW, Level(L3, 0.05), 0.18, FailZone.TOO_LOW,
                      "The letter is too low! Write it above the red line."),
            OccupancyRule(Level(L1, -0.08), Level(L3, 0.08), 0.75, FailZone.WRONG_AREA,
                          "Capital letters fill the top two rows!"),
        ),
        success_reason=CAPITAL_SUCCESS,
    ),
    LetterCategory.ASCENDER: CategoryRules(
        size_gate=LOWERCASE_SIZE,
        rules=(
            EdgeRule(Edge.TOP, Side.BELOW, Level(L2, 0.04), FailZone.WRONG_AREA,
                     "This letter is tall! Reach up to the first line."),
            EdgeRule(Edge.BOTTOM, Side.BELOW, Level(L4, 0.04), FailZone.TOO_LOW, TOO_LOW_REASON),
            EdgeRule(Edge.BOTTOM, Side.ABOVE, Level(L2, 0.04), FailZone.WRONG_AREA,
                     "The letter stays too high! Bring it down to the red line."),
        ),
        success_reason=LOWERCASE_SUCCESS,
    ),
    LetterCategory.DOT_ASCENDER: CategoryRules(
        size_gate=LOWERCASE_SIZE,
        rules=(
            EdgeRule(Edge.TOP, Side.BELOW, Level(L2, 0.08), FailZone.WRONG_AREA,
                     "Write this letter in the middle row!"),
            EdgeRule(Edge.BOTTOM, Side.BELOW, Level(L4, 0.04), FailZone.TOO_LOW, TOO_LOW_REASON),
        ),
        success_reason=LOWERCASE_SUCCESS,
    ),
    LetterCategory.DESCENDER: CategoryRules(
        size_gate=LOWERCASE_SIZE,
        rules=(
            EdgeRule(Edge.BOTTOM, Side.ABOVE, Level(L3, 0.04), FailZone.WRONG_AREA,
                     "This letter's tail goes down into the bottom row!"),
            EdgeRule(Edge.TOP, Side.BELOW, Level(L3, -0.04), FailZone.WRONG_AREA,
                     "The body of the letter is too low! Write it a little higher."),
            EdgeRule(Edge.TOP, Side.ABOVE, Level(L1, 0.02), FailZone.WRONG_AREA,
                     "Lowercase letters start in the middle row!"),
        ),
        success_reason=LOWERCASE_SUCCESS,
    ),
    LetterCategory.DEFAULT: CategoryRules(
        size_gate=LOWERCASE_SIZE,
        rules=(
            EdgeRule(Edge.BOTTOM, Side.ABOVE, Level(L2, 0.04), FailZone.WRONG_AREA,
                     "Lowercase letters go in the middle row! Move it down a little."),
            EdgeRule(Edge.TOP, Side.BELOW, Level(L3, -0.04), FailZone.WRONG_AREA,
                     "Lowercase letters go in the middle row! Move it up a little."),
            SpillRule(Side.ABOVE, Level(L2, -0.02), 0.25, FailZone.WRONG_AREA,
                      "Keep the letter inside the middle row! It pokes out the top."),
            SpillRule(Side.BELOW, Level(L3, 0.04), 0.25, FailZone.WRONG_AREA,
                      "Keep the letter inside the middle row! It drops below the red line."),
            BodyHeightRule(L2, L3, 0.30, FailZone.TOO_SMALL, TOO_SMALL_REASON),
        ),
        success_reason=LOWERCASE_SUCCESS,
    ),
}


def validate_category_rules(table: Mapping[LetterCategory, CategoryRules] = CATEGORY_RULES) -> None:
    """
    Raises:
        LetterCatalogError: If a category has no rule entry
    """
    missing = [c.value for c in LetterCategory if c not in table]
    if missing:
        raise LetterCatalogError(f"No band rules configured for categories: {missing}")


validate_category_rules()


def rules_for(spec: LetterSpec) -> CategoryRules:
    return CATEGORY_RULES[spec.category]
