#!/usr/bin/env python3
"""
Wait for the database, run migrations, seed the demo catalog, then exec uvicorn.
"""
import os
import sys

# 1) Wait for DB
import wait_for_db  # noqa: F401

# 2) Run migrations using the same settings as the app
from app.core.config import settings
from app.core.logging import configure_logging
from alembic.config import Config
from alembic import command

configure_logging()
alembic_cfg = Config(os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini"))
alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
command.upgrade(alembic_cfg, "head")

# 3) Seed (idempotent)
from app.seed import run as run_seed
run_seed()

# 4) Start uvicorn (replace current process)
port = os.getenv("PORT", "3001")
os.execv(
    sys.executable,
    [sys.executable, "-m", "uvicorn", "app.main:app", "--host", "0.0.0.0", "--port", port],
)
