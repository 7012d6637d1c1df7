"""Alembic env.py, configured for a synchronous SQLAlchemy engine."""

from logging.config import fileConfig

from sqlalchemy import create_engine

from alembic import context

# Alembic Config object, giving access to alembic.ini values.
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Import Base and register the ORM models so Alembic can detect schema changes.
from src.infrastructure.database import Base, Settings  # noqa: E402
import src.infrastructure.persistence.models  # noqa: E402, F401

target_metadata = Base.metadata

# Settings honours DATABASE_URL; alembic.ini is the fallback for the db_* defaults.
DATABASE_URL = Settings().database_url or config.get_main_option("sqlalchemy.url") or Settings().url


def run_migrations_offline() -> None:
    """Run migrations without a live DB connection (emits SQL to stdout)."""
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live DB."""
    connectable = create_engine(DATABASE_URL, echo=False)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
