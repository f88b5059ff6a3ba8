"""
Indicator module for the DustWatch System.

Selects the tone (color family) of the dashboard stat cards. Each function
encodes one card's thresholds; the UI maps a Tone to its own colors.
"""

from enum import Enum
from typing import Optional

from .status_classifier import StatusLevel


class Tone(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    PRIMARY = "primary"


def fleet_pm_tone(average_pm: float) -> Tone:
    if average_pm > 200:
        return Tone.DANGER
    if average_pm > 100:
        return Tone.WARNING
    return Tone.SUCCESS


def fleet_action_tone(routes_needing_action: int) -> Tone:
    if routes_needing_action > 15:
        return Tone.DANGER
    if routes_needing_action > 5:
        return Tone.WARNING
    return Tone.SUCCESS


def effectiveness_tone(effectiveness: Optional[float]) -> Tone:
    # Unmeasured effectiveness is shown neutrally, not as a failure
    if effectiveness is None:
        return Tone.PRIMARY
    if effectiveness > 50:
        return Tone.SUCCESS
    if effectiveness > 30:
        return Tone.WARNING
    return Tone.DANGER


def ward_status_tone(status: StatusLevel) -> Tone:
    if status.is_alarming:
        return Tone.DANGER
    if status == StatusLevel.MODERATE:
        return Tone.WARNING
    return Tone.SUCCESS


def ward_action_tone(routes_needing_action: int) -> Tone:
    if routes_needing_action > 3:
        return Tone.DANGER
    if routes_needing_action > 0:
        return Tone.WARNING
    return Tone.SUCCESS
