"""
Dust control system module for the DustWatch System.

This module contains the DustControlSystem class, the orchestrator the
dashboard talks to. It holds the ward repository and the analytics
components (classifier, aggregator, alert policy) and answers every question
the dashboard pages ask: fleet overview, ward lookup and routes, contractor
performance, priority lists and alerts. Nothing is cached; each call
recomputes from the immutable repository.
"""

import logging
from datetime import datetime
from typing import Optional

import numpy as np

from .action_plan import ActionPlan, TimeSlot, build_action_plan
from .alert_policy import Alert, AlertPolicy, ContractorAlertPolicy
from .errors import UnknownUnitError
from .fleet_summary import FleetAggregator, FleetSummary
from .group_breakdown import GroupBreakdown, breakdown
from .mock_data import generate_routes_for_ward
from .priority_ranking import critical_units, rank_by_pm, rank_priority
from .route_info import RouteInfo
from .settings import DustWatchSettings
from .status_classifier import StatusClassifier, StatusLevel
from .ward_data import WardData
from .ward_repository import WardRepository

logger = logging.getLogger(__name__)


class DustControlSystem:
    """
    Core orchestrator for the dust-mitigation dashboard.

    Collaborators are injected so tests and alternative data feeds can
    replace them; defaults are built from the settings.

    Args:
        repository: Ward data source
        settings: Configuration; DustWatchSettings() defaults if None
        classifier: PM10 status classifier
        aggregator: Fleet aggregator
        alert_policy: Policy used by alerts()
    """

    def __init__(
        self,
        repository: WardRepository,
        settings: Optional[DustWatchSettings] = None,
        classifier: Optional[StatusClassifier] = None,
        aggregator: Optional[FleetAggregator] = None,
        alert_policy: Optional[AlertPolicy] = None,
    ) -> None:
        self.repository = repository
        self.settings = settings or DustWatchSettings()
        self.classifier = classifier or StatusClassifier()
        self.aggregator = aggregator or FleetAggregator(self.classifier)
        self.alert_policy = alert_policy or ContractorAlertPolicy(
            window=self.settings.alert_window,
            threshold=self.settings.alert_threshold,
            staleness=self.settings.staleness,
        )

    # ==================== Fleet ====================

    def overview(self) -> FleetSummary:
        """
        Fleet-wide summary over all wards.

        Raises:
            EmptyInputError: If the repository holds no wards
        """
        summary = self.aggregator.summarize(self.repository.all())
        logger.debug(
            "Overview: %d wards, avg PM %d, %d routes need action",
            summary.unit_count, summary.average_pm, summary.action_count,
        )
        return summary

    def ranked_wards(self) -> list[WardData]:
        """All wards, highest PM first."""
        return rank_by_pm(self.repository.all())

    def critical_wards(self) -> list[WardData]:
        """Poor or critical wards for the callout, in repository order."""
        return critical_units(
            self.repository.all(),
            limit=self.settings.critical_list_limit,
            classifier=self.classifier,
        )

    def contractor_performance(self, sort_by: Optional[str] = None) -> dict[str, GroupBreakdown]:
        """Per-contractor breakdown of the wards."""
        return breakdown(
            self.repository.all(),
            lambda w: w.contractor,
            sort_by=sort_by,
            aggregator=self.aggregator,
        )

    # ==================== Wards ====================

    def ward(self, ward_id: str) -> WardData:
        """
        Looks up a ward by id.

        Raises:
            UnknownUnitError: If no ward has that id
        """
        try:
            return self.repository.get(ward_id)
        except UnknownUnitError:
            logger.warning("Unknown ward requested: %r", ward_id)
            raise

    def ward_status(self, ward_id: str) -> StatusLevel:
        return self.classifier.classify(self.ward(ward_id).pm_level)

    def ward_routes(self, ward_id: str, now: Optional[datetime] = None) -> list[RouteInfo]:
        """
        Synthesized routes of a ward, highest PM first.

        The generator for each ward is seeded from the configured route seed
        and the ward's position, so repeated calls return the same routes.

        Raises:
            UnknownUnitError: If no ward has that id
        """
        ward = self.ward(ward_id)
        position = self.repository.all().index(ward)
        rng = np.random.default_rng([self.settings.route_seed, position])
        return generate_routes_for_ward(ward, rng, now=now)

    def all_routes(self, now: Optional[datetime] = None) -> list[RouteInfo]:
        """Routes of every ward, ward by ward in repository order."""
        now = now or datetime.now()
        routes: list[RouteInfo] = []
        for ward in self.repository:
            routes.extend(self.ward_routes(ward.id, now=now))
        return routes

    def priority_routes(self, ward_id: str, now: Optional[datetime] = None) -> list[RouteInfo]:
        """Routes of a ward that need sprinkling, highest impact first."""
        return rank_priority(self.ward_routes(ward_id, now=now))

    def action_plan(
        self,
        slot: TimeSlot,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> ActionPlan:
        """
        Sprinkling plan for one slot built from the current routes of every ward.

        Args:
            slot: Time slot the plan is for
            limit: Maximum number of routes, or None for all that need action
            now: Route synthesis time; datetime.now() if None
        """
        return build_action_plan(self.all_routes(now=now), slot, limit=limit)

    # ==================== Alerts ====================

    def alerts(self, now: Optional[datetime] = None) -> list[Alert]:
        """
        Contractor alerts derived from all routes.

        Args:
            now: Evaluation time; datetime.now() if None
        """
        now = now or datetime.now()
        alerts = self.alert_policy.evaluate(self.all_routes(now=now), now)
        if alerts:
            logger.info("Derived %d contractor alerts", len(alerts))
        return alerts
