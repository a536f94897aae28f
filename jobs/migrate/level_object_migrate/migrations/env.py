"""Alembic environment for the level object database.

The target URL comes from `sqlalchemy.url` when the caller set it on the
config (the migration job does), otherwise from `DATABASE_URL`. Revisions are
hand-written; there is no ORM metadata to autogenerate from.
"""

from alembic import context

from level_common.db import create_db_engine, database_url

config = context.config


def _url() -> str:
    return config.get_main_option("sqlalchemy.url") or database_url()


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout (`alembic upgrade head --sql`)."""
    context.configure(
        url=_url(),
        target_metadata=None,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection, one transaction per revision."""
    engine = create_db_engine(_url(), pool_size=1)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=None,
                transaction_per_migration=True,
            )

            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
