#!/usr/bin/env python3
"""
Launch utility for the todo list API.
Supports several run modes.
"""

import asyncio
import logging
import os
import subprocess
import sys
from pathlib import Path

from todolists import db
from todolists.settings import get_settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def get_port() -> int:
    """Return the port the server should bind to."""
    return int(os.getenv("PORT", "8080"))


def get_workers() -> int:
    """Return the number of workers to use for production server."""
    raw_value = os.getenv("WEB_CONCURRENCY", "1")
    try:
        workers = int(raw_value)
    except ValueError:
        logger.warning("Invalid WEB_CONCURRENCY value '%s'; defaulting to 1", raw_value)
        workers = 1
    return max(1, workers)


def log_startup(port: int, workers: int) -> None:
    """Log a single startup line for process managers."""
    logger.info(
        "Starting on 0.0.0.0:%s (STORAGE=%s, WORKERS=%s)",
        port,
        get_settings().storage_backend,
        workers,
    )


def run_development():
    """Development mode with auto-reload."""
    import uvicorn

    port = get_port()
    log_startup(port, 1)
    uvicorn.run(
        "todolists.main:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        log_level="info",
    )


def run_production():
    """Production mode."""
    import uvicorn

    port = get_port()
    workers = get_workers()
    settings = get_settings()
    if workers > 1 and not settings.uses_database:
        logger.warning(
            "Session storage is per process; sessions will not be shared across %s workers",
            workers,
        )
    log_startup(port, workers)
    uvicorn.run(
        "todolists.main:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
        log_level="info"
    )


async def init_database():
    """Create the lists and todos tables, then exit."""
    settings = get_settings()
    if not settings.database_url:
        raise RuntimeError("Set DATABASE_URL or STORAGE_BACKEND=database to initialize a database")
    await db.init_db(settings.database_url, min_size=1, max_size=1)
    await db.close_db()
    logger.info("Schema ready")


def run_tests():
    """Run the test suite."""
    logger.info("Running tests...")

    result = subprocess.run([
        "pytest", "tests/", "-v",
        "--cov=todolists", "--cov-report=term"
    ], cwd=Path(__file__).parent)

    sys.exit(result.returncode)


def show_help():
    """Show usage."""
    print("""
Todo Lists API - Launch Utility

Usage:
  python run.py [command]

Commands:
  dev        - Run in development mode (auto-reload)
  prod       - Run in production mode
  init-db    - Create the database schema and exit
  test       - Run tests
  help       - Show this help message

Examples:
  python run.py dev                                   # Session storage
  DATABASE_URL=postgresql:///todos python run.py prod # Postgres storage
    """.strip())


def main():
    """Entry point."""
    if len(sys.argv) < 2:
        mode = "prod"
    else:
        mode = sys.argv[1].lower()

    try:
        if mode == "dev":
            run_development()
        elif mode == "prod":
            run_production()
        elif mode == "init-db":
            asyncio.run(init_database())
        elif mode == "test":
            run_tests()
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
