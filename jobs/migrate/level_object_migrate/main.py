"""Migration job entrypoint.

Upgrades the database named by `DATABASE_URL` to the latest Alembic revision.
Run it once before starting (or upgrading) the API service; the service itself
never migrates.

The Alembic script directory ships inside this package
(`level_object_migrate/migrations`), so the job works the same from a source
checkout and from an installed wheel. `jobs/migrate/alembic.ini` points at the
same directory for running the `alembic` CLI by hand.

Environment:
    DATABASE_URL: SQLAlchemy connection string (required).
    LOG_LEVEL: Log level name (default INFO).

Returns:
    The process exit code (0 = success), so schedulers can retry/alert.
"""

import logging
import os
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.util import CommandError
from sqlalchemy.exc import SQLAlchemyError

from level_common.db import database_url
from level_common.logging import setup_logging

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parent / "migrations"


def make_config(url: str, version_locations: list[Path] | None = None) -> Config:
    """Build an Alembic config for `url` without reading an ini file.

    Args:
        url: SQLAlchemy connection string of the target database.
        version_locations: Revision directories. Defaults to the bundled
            `migrations/versions`.

    Returns:
        alembic.config.Config: Config ready for `alembic.command` calls.
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    # ConfigParser interpolation: a literal % in a password must be doubled.
    cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    if version_locations:
        cfg.set_main_option("path_separator", "os")
        cfg.set_main_option("version_path_separator", "os")
        cfg.set_main_option(
            "version_locations", os.pathsep.join(str(p) for p in version_locations)
        )
    return cfg


def main() -> int:
    """Run the job."""
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        url = database_url()
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 2

    try:
        command.upgrade(make_config(url), "head")
    except (CommandError, SQLAlchemyError):
        logger.exception("Migration failed")
        return 1

    logger.info("Migrations applied successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
