"""Block until the PostgreSQL server behind DATABASE_URL accepts connections."""
import logging
import os
import time
from urllib.parse import urlparse

import psycopg2

logger = logging.getLogger("wait_for_db")


def wait(database_url: str, timeout_s: int) -> None:
    # SQLAlchemy URL may carry a driver suffix
    url = database_url.replace("postgresql+psycopg2://", "postgresql://").replace("postgres://", "postgresql://")
    if not url.startswith("postgresql://"):
        logger.info("not a PostgreSQL url, nothing to wait for")
        return
    p = urlparse(url)
    params = dict(
        host=p.hostname or "localhost",
        port=p.port or 5432,
        user=p.username or "travels",
        password=p.password or "travels",
        dbname=(p.path or "/travels").lstrip("/") or "travels",
    )

    logger.info("waiting for Postgres at %s:%s db=%s (timeout=%ss)", params["host"], params["port"], params["dbname"], timeout_s)
    start = time.time()
    while True:
        try:
            psycopg2.connect(connect_timeout=3, **params).close()
            logger.info("Postgres is ready")
            return
        except psycopg2.OperationalError as e:
            if time.time() - start > timeout_s:
                logger.error("timed out waiting for DB: %s", e)
                raise
            time.sleep(1)


DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise SystemExit("DATABASE_URL is not set")

logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
wait(DATABASE_URL, int(os.getenv("DB_WAIT_TIMEOUT", "60")))
