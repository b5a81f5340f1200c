import asyncio
import sys
from pathlib import Path
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

# Add parent directory to path so we can import portfolio modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from portfolio.core.config import settings
from sqlmodel import SQLModel

import portfolio.models  # noqa: F401  (register every table on the metadata)


# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# target metadata
target_metadata = SQLModel.metadata

# -----------------------
# OFFLINE (emit SQL)
# -----------------------
def run_migrations_offline():
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()

# -----------------------
# ASYNC migration
# -----------------------
async def run_migrations_online():
    """Run migrations in async mode."""
    connectable = create_async_engine(
        settings.DATABASE_URL,
        echo=False,
        poolclass=pool.NullPool,
    )

    async with connectable.begin() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def do_run_migrations(connection: Connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    context.run_migrations()

# -----------------------
# Entry point
# -----------------------
if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
