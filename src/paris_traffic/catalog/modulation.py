"""
Temporal Modulation Tables
==========================

Per-category hour-of-day and day-of-week multiplier curves.

Each category owns:
    - a 24-entry hour curve, multipliers in [0, 1]
    - a 7-entry day curve (0 = Sunday ... 6 = Saturday), unclamped

Fractional Hours:
    The hour multiplier is interpolated between the floor hour and the next
    hour (23 wraps to 0) with a cubic smoothstep on minute / 60:

        t = 3u² - 2u³,  u = minute / 60

    The ease has zero slope at both ends, so the animated field crosses the
    hour boundary without a visible jump.

Fallbacks:
    A category missing from a table yields 0.5 for hours and 1.0 for days.
    This masks configuration gaps, so the first miss for each category is
    logged as a warning.
"""

import logging
import math
from typing import Mapping, Optional, Sequence, Set

from paris_traffic.models.poi import Category


logger = logging.getLogger(__name__)


DEFAULT_HOUR_MULTIPLIER = 0.5
DEFAULT_DAY_MULTIPLIER = 1.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def smoothstep(t: float) -> float:
    """Cubic ease 3t² - 2t³ on [0, 1]."""
    return t * t * (3 - 2 * t)


class ModulationTable:
    """
    Hour and day multiplier curves keyed by category.

    Attributes:
        hour_curves: category -> 24 hour multipliers
        day_curves: category -> 7 day multipliers
        falsy_fallback: Also fall back when a table entry is 0
            (behaviour of the legacy hexagon generator)

    Example:
        table = DEFAULT_MODULATION
        table.hour_multiplier(Category.TOURIST, 13, 30)  # between 13h and 14h
        table.day_multiplier(Category.BUSINESS, 0)       # Sunday
    """

    def __init__(
        self,
        hour_curves: Mapping[str, Sequence[float]],
        day_curves: Mapping[str, Sequence[float]],
        falsy_fallback: bool = False,
    ) -> None:
        for category, curve in hour_curves.items():
            if len(curve) != 24:
                raise ValueError(f"Hour curve for {category} must have 24 entries")
        for category, curve in day_curves.items():
            if len(curve) != 7:
                raise ValueError(f"Day curve for {category} must have 7 entries")

        self.hour_curves = dict(hour_curves)
        self.day_curves = dict(day_curves)
        self.falsy_fallback = falsy_fallback
        self._warned: Set[str] = set()

    def _warn_missing(self, category: str, table: str) -> None:
        key = f"{table}:{category}"
        if key not in self._warned:
            self._warned.add(key)
            logger.warning(
                f"No {table} curve for category '{category}', "
                f"using neutral multiplier"
            )

    def _lookup(
        self,
        curve: Optional[Sequence[float]],
        index: int,
        default: float,
    ) -> float:
        if curve is None or not 0 <= index < len(curve):
            return default
        value = curve[index]
        if self.falsy_fallback and not value:
            return default
        return value

    def hour_value(self, category: str, hour: int) -> float:
        """Raw table entry for a whole hour, 0.5 when missing."""
        curve = self.hour_curves.get(category)
        if curve is None:
            self._warn_missing(category, "hour")
        return self._lookup(curve, hour, DEFAULT_HOUR_MULTIPLIER)

    def hour_multiplier(self, category: str, hour: float, minute: float = 0) -> float:
        """
        Hour multiplier interpolated to minute precision.

        Args:
            category: Point-of-interest category
            hour: Hour of day; fractional part is ignored
            minute: Minute within the hour, 0 <= minute < 60

        Returns:
            Smoothstep blend of the floor hour and the next hour
        """
        current_hour = int(math.floor(hour))
        next_hour = (current_hour + 1) % 24
        t = smoothstep(minute / 60)

        current_value = self.hour_value(category, current_hour)
        next_value = self.hour_value(category, next_hour)

        return lerp(current_value, next_value, t)

    def day_multiplier(self, category: str, day: int) -> float:
        """Day-of-week multiplier, 1.0 when missing."""
        curve = self.day_curves.get(category)
        if curve is None:
            self._warn_missing(category, "day")
        return self._lookup(curve, day, DEFAULT_DAY_MULTIPLIER)

    @property
    def categories(self) -> Set[str]:
        """Categories covered by both curves."""
        return set(self.hour_curves) & set(self.day_curves)


# =============================================================================
# Density Field Curves
# =============================================================================

TIME_PATTERNS = {
    Category.TOURIST: [0.1, 0.05, 0.05, 0.05, 0.05, 0.1, 0.2, 0.35, 0.55, 0.75, 0.9, 1.0, 0.95, 0.9, 1.0, 1.0, 0.95, 0.85, 0.7, 0.5, 0.35, 0.25, 0.15, 0.1],
    Category.SHOPPING: [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 0.85, 0.8, 0.9, 1.0, 1.0, 0.95, 0.85, 0.6, 0.3, 0.1, 0.0, 0.0],
    Category.BUSINESS: [0.05, 0.02, 0.02, 0.02, 0.05, 0.1, 0.25, 0.6, 0.95, 1.0, 0.95, 0.9, 0.7, 0.75, 0.9, 0.95, 0.9, 0.85, 0.55, 0.25, 0.12, 0.08, 0.05, 0.05],
    Category.TRANSPORT: [0.15, 0.08, 0.05, 0.05, 0.1, 0.25, 0.55, 0.9, 1.0, 0.8, 0.5, 0.45, 0.5, 0.5, 0.5, 0.55, 0.65, 0.95, 1.0, 0.85, 0.6, 0.4, 0.3, 0.2],
    Category.NIGHTLIFE: [0.7, 0.5, 0.3, 0.15, 0.05, 0.02, 0.02, 0.05, 0.1, 0.15, 0.2, 0.25, 0.35, 0.35, 0.35, 0.4, 0.4, 0.5, 0.6, 0.75, 0.9, 1.0, 1.0, 0.9],
    Category.PARK: [0.02, 0.01, 0.01, 0.01, 0.02, 0.05, 0.15, 0.35, 0.5, 0.6, 0.75, 0.85, 0.8, 0.75, 0.85, 0.95, 1.0, 0.95, 0.8, 0.55, 0.3, 0.12, 0.05, 0.02],
    Category.EDUCATION: [0.05, 0.02, 0.02, 0.02, 0.02, 0.05, 0.15, 0.4, 0.8, 1.0, 0.95, 0.85, 0.7, 0.75, 0.9, 0.95, 0.85, 0.7, 0.45, 0.25, 0.15, 0.1, 0.08, 0.05],
    Category.RESIDENTIAL: [0.35, 0.25, 0.18, 0.15, 0.15, 0.2, 0.45, 0.65, 0.5, 0.4, 0.45, 0.5, 0.6, 0.55, 0.5, 0.55, 0.6, 0.75, 0.9, 1.0, 0.95, 0.8, 0.6, 0.45],
}

DAY_PATTERNS = {
    Category.TOURIST: [1.15, 0.8, 0.85, 0.9, 0.95, 1.0, 1.2],
    Category.SHOPPING: [0.65, 0.55, 0.65, 0.75, 0.85, 0.95, 1.15],
    Category.BUSINESS: [0.08, 1.0, 1.0, 1.0, 1.0, 0.9, 0.12],
    Category.TRANSPORT: [0.65, 1.0, 1.0, 1.0, 1.0, 1.1, 0.75],
    Category.NIGHTLIFE: [0.75, 0.45, 0.55, 0.65, 0.85, 1.15, 1.0],
    Category.PARK: [1.25, 0.55, 0.6, 0.65, 0.7, 0.8, 1.2],
    Category.EDUCATION: [0.1, 1.0, 1.0, 1.0, 1.0, 0.9, 0.15],
    Category.RESIDENTIAL: [1.0, 0.9, 0.9, 0.9, 0.9, 0.95, 1.0],
}

DEFAULT_MODULATION = ModulationTable(TIME_PATTERNS, DAY_PATTERNS)


# =============================================================================
# Legacy Hexagon Curves
# =============================================================================

LEGACY_TIME_PATTERNS = {
    Category.TOURIST: [0.1, 0.05, 0.05, 0.05, 0.05, 0.1, 0.2, 0.3, 0.5, 0.7, 0.9, 1.0, 0.95, 0.9, 1.0, 1.0, 0.95, 0.85, 0.7, 0.5, 0.35, 0.25, 0.15, 0.1],
    Category.SHOPPING: [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.1, 0.2, 0.4, 0.7, 0.9, 0.85, 0.8, 0.9, 1.0, 1.0, 0.95, 0.85, 0.6, 0.3, 0.1, 0.0, 0.0],
    Category.BUSINESS: [0.05, 0.02, 0.02, 0.02, 0.05, 0.1, 0.2, 0.5, 0.9, 1.0, 0.95, 0.9, 0.7, 0.75, 0.9, 0.95, 0.9, 0.85, 0.6, 0.3, 0.15, 0.1, 0.05, 0.05],
    Category.TRANSPORT: [0.15, 0.08, 0.05, 0.05, 0.1, 0.2, 0.5, 0.85, 1.0, 0.8, 0.5, 0.45, 0.5, 0.5, 0.5, 0.55, 0.65, 0.9, 1.0, 0.85, 0.6, 0.4, 0.3, 0.2],
    Category.NIGHTLIFE: [0.6, 0.4, 0.2, 0.1, 0.05, 0.02, 0.02, 0.05, 0.1, 0.15, 0.2, 0.25, 0.35, 0.35, 0.35, 0.4, 0.4, 0.45, 0.55, 0.7, 0.85, 0.95, 1.0, 0.9],
    Category.PARK: [0.02, 0.01, 0.01, 0.01, 0.02, 0.05, 0.15, 0.3, 0.45, 0.55, 0.7, 0.8, 0.75, 0.7, 0.8, 0.9, 1.0, 0.95, 0.8, 0.6, 0.35, 0.15, 0.05, 0.02],
    Category.RESIDENTIAL: [0.3, 0.2, 0.15, 0.15, 0.15, 0.2, 0.4, 0.6, 0.5, 0.4, 0.45, 0.5, 0.6, 0.55, 0.5, 0.55, 0.6, 0.7, 0.85, 0.95, 1.0, 0.9, 0.7, 0.5],
}

LEGACY_DAY_PATTERNS = {
    Category.TOURIST: [1.1, 0.8, 0.85, 0.9, 0.95, 1.0, 1.15],
    Category.SHOPPING: [0.7, 0.6, 0.7, 0.8, 0.9, 0.95, 1.1],
    Category.BUSINESS: [0.1, 1.0, 1.0, 1.0, 1.0, 0.9, 0.15],
    Category.TRANSPORT: [0.7, 1.0, 1.0, 1.0, 1.0, 1.1, 0.8],
    Category.NIGHTLIFE: [0.7, 0.5, 0.6, 0.7, 0.9, 1.1, 1.0],
    Category.PARK: [1.2, 0.6, 0.65, 0.7, 0.75, 0.8, 1.15],
    Category.RESIDENTIAL: [1.0, 0.9, 0.9, 0.9, 0.9, 0.95, 1.0],
}

# Zero entries fall back to the neutral multiplier in the legacy view
LEGACY_MODULATION = ModulationTable(
    LEGACY_TIME_PATTERNS,
    LEGACY_DAY_PATTERNS,
    falsy_fallback=True,
)
