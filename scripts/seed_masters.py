#!/usr/bin/env python3
"""
Seed the master namespaces with reference data using the configured store.

Usage:
  python scripts/seed_masters.py [--force]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from erp.core.config import get_settings  # noqa: E402
from erp.core.logging import configure_logging  # noqa: E402
from erp.repositories.backing_store import open_backing_store  # noqa: E402
from erp.repositories.registry import StoreRegistry  # noqa: E402
from erp.services.seed_service import SeedService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed master data")
    ap.add_argument("--force", action="store_true", help="Ignore the seeded flag (existing codes are still skipped)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings)
    backing = open_backing_store(settings)
    if backing is None:
        raise SystemExit(f"Backing store '{settings.storage_backend}' unavailable")

    service = SeedService(StoreRegistry(backing, settings=settings))
    report = service.seed(already_seeded=False if args.force else None)
    if report.skipped:
        print("Already seeded; nothing to do (use --force to re-run).")
        return
    print(f"OK: {report.total_created} records created, {report.existing} already present")
    for namespace, count in report.created.items():
        print(f"  {namespace}: {count}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
