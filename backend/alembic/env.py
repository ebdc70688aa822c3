"""Alembic migrations for the posts and post_tags tables.

The target URL is the one the API itself connects with: when DATABASE_URL
is set it goes through blog.config.Settings (so a postgresql:// URL from the
host is rewritten for asyncpg); otherwise alembic.ini's sqlalchemy.url is used.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from blog.config import Settings
from blog.db.base import Base
import blog.models  # noqa: F401  registers Post and PostTag on Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _blog_database_url() -> str:
    if os.environ.get("DATABASE_URL"):
        return Settings().database_url
    return config.get_main_option("sqlalchemy.url")


def run_migrations_offline() -> None:
    """Emit the blog schema as SQL without connecting."""
    context.configure(
        url=_blog_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_async() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _blog_database_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


def run_migrations_online() -> None:
    asyncio.run(_migrate_async())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
