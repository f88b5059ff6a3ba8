"""
Ward repository module for the DustWatch System.

This module contains the WardRepository class, an immutable data source for
ward records with keyed lookup, and the SnapshotHolder class which lets a
producer replace the whole repository while readers keep using the snapshot
they already hold.
"""

import logging
import threading
from typing import Iterable, Iterator, Optional

from .errors import UnknownUnitError
from .ward_data import WardData

logger = logging.getLogger(__name__)


class WardRepository:
    """
    Read-only collection of wards with O(1) lookup by id.

    The wards are copied into a tuple on construction and never change.
    Iteration follows the order the wards were supplied in.

    Args:
        wards: Ward records; ids must be unique
        validate: If True, every ward must pass WardData.validate()

    Raises:
        ValueError: On a duplicate id, or an invalid ward when validating
    """

    def __init__(self, wards: Iterable[WardData], validate: bool = True) -> None:
        self._wards = tuple(wards)
        self._by_id: dict[str, WardData] = {}

        for ward in self._wards:
            if validate:
                valid, reason = ward.validate()
                if not valid:
                    raise ValueError(f"invalid ward {ward.id!r}: {reason}")
            if ward.id in self._by_id:
                raise ValueError(f"duplicate ward id: {ward.id!r}")
            self._by_id[ward.id] = ward

        logger.debug("Loaded %d wards", len(self._wards))

    def all(self) -> tuple[WardData, ...]:
        return self._wards

    def get(self, ward_id: str) -> WardData:
        """
        Returns the ward with the given id.

        Raises:
            UnknownUnitError: If no ward has that id
        """
        try:
            return self._by_id[ward_id]
        except KeyError:
            raise UnknownUnitError(ward_id) from None

    def find(self, ward_id: str) -> Optional[WardData]:
        """Returns the ward with the given id, or None."""
        return self._by_id.get(ward_id)

    def contractors(self) -> list[str]:
        """Distinct contractor names in first-seen order."""
        return list(dict.fromkeys(w.contractor for w in self._wards))

    def __len__(self) -> int:
        return len(self._wards)

    def __iter__(self) -> Iterator[WardData]:
        return iter(self._wards)

    def __contains__(self, ward_id: object) -> bool:
        return ward_id in self._by_id


class SnapshotHolder:
    """
    Holds the latest WardRepository snapshot.

    A single writer publishes new snapshots; readers call current() and work
    on the returned repository without further locking. Published
    repositories are never mutated, so a reader's snapshot stays consistent
    even if a newer one is published meanwhile.
    """

    def __init__(self, initial: WardRepository) -> None:
        self._current = initial
        self._version = 1
        # Serializes writers only; current() is a plain reference read
        self._write_lock = threading.Lock()

    @property
    def version(self) -> int:
        return self._version

    def current(self) -> WardRepository:
        return self._current

    def publish(self, repository: WardRepository) -> int:
        """
        Replaces the current snapshot.

        Returns:
            The version number of the published snapshot
        """
        with self._write_lock:
            self._current = repository
            self._version += 1
            logger.info("Published ward snapshot v%d (%d wards)", self._version, len(repository))
            return self._version
