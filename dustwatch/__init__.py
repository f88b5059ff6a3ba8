"""
DustWatch: ward-level PM10 analytics for municipal dust mitigation.

Classifies PM10 readings, aggregates ward and route readings, breaks them
down by contractor or ward, ranks sprinkling priorities and derives
contractor alerts.
"""

from .status_classifier import StatusClassifier, StatusLevel, classify
from .fleet_summary import FleetAggregator, FleetSummary
from .group_breakdown import GroupBreakdown, breakdown
from .priority_ranking import rank_priority
from .dust_control_system import DustControlSystem

__all__ = [
    'StatusClassifier',
    'StatusLevel',
    'classify',
    'FleetAggregator',
    'FleetSummary',
    'GroupBreakdown',
    'breakdown',
    'rank_priority',
    'DustControlSystem',
]
