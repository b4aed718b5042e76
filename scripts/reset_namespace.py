#!/usr/bin/env python3
"""
Reset stored data: drop one namespace's records and/or the seeded flag.

Usage:
  python scripts/reset_namespace.py --entity category
  python scripts/reset_namespace.py --all --unseed
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from erp.core.config import get_settings  # noqa: E402
from erp.repositories.backing_store import open_backing_store  # noqa: E402
from erp.repositories.registry import StoreRegistry  # noqa: E402
from erp.services.seed_service import SeedService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset stored namespaces")
    ap.add_argument("--entity", action="append", default=[], help="Entity slug to clear (repeatable)")
    ap.add_argument("--all", action="store_true", help="Clear every registered namespace")
    ap.add_argument("--unseed", action="store_true", help="Clear the seeded flag as well")
    args = ap.parse_args()

    settings = get_settings()
    backing = open_backing_store(settings)
    if backing is None:
        raise SystemExit(f"Backing store '{settings.storage_backend}' unavailable")
    registry = StoreRegistry(backing, settings=settings)

    slugs = registry.slugs() if args.all else [s.strip() for s in args.entity if s.strip()]
    if not slugs and not args.unseed:
        raise SystemExit("Nothing to reset: pass --entity, --all or --unseed")
    for slug in slugs:
        store = registry.by_slug(slug)
        if store is None:
            raise SystemExit(f"Entity '{slug}' nao existe")
        store.clear()
        print(f"OK: {store.namespace} cleared")
    if args.unseed:
        SeedService(registry).reset()
        print("OK: seeded flag cleared")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
