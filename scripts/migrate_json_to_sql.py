"""One-off migration script: JSON file store -> SQL store (DATABASE_URL)."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# make the erp package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from erp.core.config import get_settings  # noqa: E402
from erp.repositories.json_storage import JsonFileKeyValueStore  # noqa: E402
from erp.repositories.sql_store import SQLKeyValueStore  # noqa: E402


def migrate(source: Path, url: str) -> int:
    if not source.exists():
        raise SystemExit(f"Arquivo nao encontrado: {source}")
    src = JsonFileKeyValueStore(source)
    dst = SQLKeyValueStore(url)
    data = src.load()
    for key, value in data.items():
        dst.set(key, value)
    return len(data)


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy every key of the JSON store into the SQL store")
    ap.add_argument("--source", default=settings.storage_path, help="JSON store file")
    ap.add_argument("--database-url", default=settings.database_url, help="Target SQLAlchemy URL")
    args = ap.parse_args()
    if not (args.database_url or "").strip():
        raise SystemExit("DATABASE_URL must be configured")
    count = migrate(Path(args.source), args.database_url)
    print(f"{count} keys migrated to SQL successfully.")


if __name__ == "__main__":
    main()
