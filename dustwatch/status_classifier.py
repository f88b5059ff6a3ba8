"""
Status classifier module for the DustWatch System.

This module contains the StatusLevel enum and the StatusClassifier class,
a pure classifier that maps a PM10 reading (µg/m³) to one of four status
tiers. Every consumer (map outline colors, badges, critical callouts) keys
its behavior on StatusLevel, so a new tier cannot be silently ignored.
"""

from enum import Enum


class StatusLevel(str, Enum):
    """
    Status tier for a PM10 reading.

    Members are ordered from least to most severe. The string value is the
    lowercase tier name used by the dashboard.
    """

    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "Critical"."""
        return STATUS_LABELS[self]

    @property
    def color(self) -> str:
        """Hex color used for map outlines and status dots."""
        return STATUS_COLORS[self]

    @property
    def severity(self) -> int:
        """Position in the severity order (0 = good, 3 = critical)."""
        return _SEVERITY_ORDER.index(self)

    @property
    def is_alarming(self) -> bool:
        """True for tiers that require immediate action (poor, critical)."""
        return self in (StatusLevel.POOR, StatusLevel.CRITICAL)


_SEVERITY_ORDER = [
    StatusLevel.GOOD,
    StatusLevel.MODERATE,
    StatusLevel.POOR,
    StatusLevel.CRITICAL,
]

STATUS_LABELS = {
    StatusLevel.GOOD: "Good",
    StatusLevel.MODERATE: "Moderate",
    StatusLevel.POOR: "Poor",
    StatusLevel.CRITICAL: "Critical",
}

STATUS_COLORS = {
    StatusLevel.GOOD: "#22c55e",
    StatusLevel.MODERATE: "#f59e0b",
    StatusLevel.POOR: "#f97316",
    StatusLevel.CRITICAL: "#ef4444",
}


class StatusClassifier:
    """
    Pure classifier for PM10 status tiers.

    Thresholds are compared with strict ">" from the highest tier down, so a
    reading exactly on a threshold falls into the lower tier (250 is poor,
    251 is critical). The classifier is total: any real number, including
    negative values, maps to a tier.
    """

    # Lower bounds (exclusive) for each tier, evaluated highest first
    CRITICAL_THRESHOLD = 250
    POOR_THRESHOLD = 150
    MODERATE_THRESHOLD = 100

    def classify(self, pm_level: float) -> StatusLevel:
        """
        Classifies a PM10 reading into a status tier.

        Args:
            pm_level: PM10 concentration in µg/m³

        Returns:
            CRITICAL if pm_level > 250, POOR if > 150, MODERATE if > 100,
            GOOD otherwise
        """
        if pm_level > self.CRITICAL_THRESHOLD:
            return StatusLevel.CRITICAL
        if pm_level > self.POOR_THRESHOLD:
            return StatusLevel.POOR
        if pm_level > self.MODERATE_THRESHOLD:
            return StatusLevel.MODERATE
        return StatusLevel.GOOD


_default_classifier = StatusClassifier()


def classify(pm_level: float) -> StatusLevel:
    """Classifies a PM10 reading with the default thresholds."""
    return _default_classifier.classify(pm_level)
