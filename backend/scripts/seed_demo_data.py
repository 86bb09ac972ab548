"""Seed the configured relational store with the demo user (safe to re-run)."""
import sys

from fittrack.core.config import get_settings
from fittrack.core.logging import configure_logging
from fittrack.storage import DatabaseStorage


def seed(database_url: str) -> bool:
    storage = DatabaseStorage.from_url(database_url)
    try:
        storage.init_schema()
        return storage.seed_default_data()
    finally:
        storage.close()


if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    url = sys.argv[1] if len(sys.argv) > 1 else settings.database_url
    if seed(url):
        print(f"Demo data inserted into {url}.")
    else:
        print("Demo user already present, nothing to do.")
