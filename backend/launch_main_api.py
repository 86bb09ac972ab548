#!/usr/bin/env python3
"""Run the FitTrack API with uvicorn, configured from the same settings as the app."""
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"

if __name__ == "__main__":
    import sys

    import uvicorn

    sys.path.insert(0, str(SRC_DIR))
    from fittrack.core.config import get_settings

    settings = get_settings()
    storage = settings.database_url if settings.uses_database else f"in-memory (demo data: {settings.seed_demo_data})"

    print(f"{settings.app_name} {settings.app_version}")
    print(f"  listening on http://{settings.host}:{settings.port}{settings.docs_url}")
    print(f"  storage:     {storage}")

    uvicorn.run(
        "fittrack.main:app",
        app_dir=str(SRC_DIR),
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
