"""
One-time population of the master namespaces with reference data.

Seeding is an explicit startup step (app lifespan or scripts/seed_masters.py).
A single sentinel key marks a completed run. The sentinel is only written
after every namespace is done, so an interrupted run is retried in full on the
next start; records whose ``code`` already exists in their namespace are
skipped, which keeps that retry from appending duplicates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from erp.domain.namespaces import SEED_SENTINEL_KEY
from erp.repositories.backing_store import BackingStoreUnavailableError
from erp.repositories.registry import StoreRegistry

from .seed_data import MASTER_SEEDS

logger = logging.getLogger(__name__)

SeedPlan = Iterable[tuple[str, Iterable[dict[str, Any]]]]


class SeedError(Exception):
    """Raised when the seed plan names a namespace with no record store."""


@dataclass
class SeedReport:
    skipped: bool = False
    created: dict[str, int] = field(default_factory=dict)
    existing: int = 0

    @property
    def total_created(self) -> int:
        return sum(self.created.values())


class SeedService:
    def __init__(self, registry: StoreRegistry, seeds: SeedPlan = MASTER_SEEDS) -> None:
        self.registry = registry
        self.seeds = seeds

    @property
    def backing(self):
        return self.registry.backing

    def is_seeded(self) -> bool:
        if self.backing is None:
            return False
        try:
            return self.backing.get(SEED_SENTINEL_KEY) == "true"
        except BackingStoreUnavailableError as exc:
            logger.warning("Cannot read seed flag: %s", exc)
            return False

    def mark_seeded(self) -> None:
        if self.backing is None:
            return
        try:
            self.backing.set(SEED_SENTINEL_KEY, "true")
        except BackingStoreUnavailableError as exc:
            logger.warning("Cannot write seed flag: %s", exc)

    def reset(self) -> None:
        """Forget that seeding ran; records already written stay."""
        if self.backing is None:
            return
        try:
            self.backing.remove(SEED_SENTINEL_KEY)
        except BackingStoreUnavailableError as exc:
            logger.warning("Cannot clear seed flag: %s", exc)

    def seed(self, already_seeded: Optional[bool] = None) -> SeedReport:
        if already_seeded is None:
            already_seeded = self.is_seeded()
        if already_seeded:
            logger.info("Masters already seeded, skipping...")
            return SeedReport(skipped=True)
        if self.backing is None:
            logger.warning("No backing store; master data not seeded.")
            return SeedReport(skipped=True)

        logger.info("Seeding master data...")
        report = SeedReport()
        for namespace, records in self.seeds:
            store = self.registry.by_key(namespace)
            if store is None:
                raise SeedError(f"No record store registered for {namespace}")
            present = {item.code for item in store.get_all()}
            created = 0
            for payload in records:
                if payload.get("code") in present:
                    report.existing += 1
                    continue
                store.create(payload)
                created += 1
            report.created[namespace] = created
            logger.debug("Seeded %d records into %s", created, namespace)

        self.mark_seeded()
        logger.info("Master data seeding completed! (%d records)", report.total_created)
        return report
