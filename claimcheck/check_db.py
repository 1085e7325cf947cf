# claimcheck/check_db.py

import logging
import sys
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from claimcheck.config import Settings
from claimcheck.database import make_engine


logger = logging.getLogger(__name__)


def check_connection(database_url: str) -> list[str]:
    """Connects, runs a trivial query and returns the table names found."""
    engine = make_engine(database_url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            return inspect(conn).get_table_names()
    finally:
        engine.dispose()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    settings = Settings.from_env()
    logger.info("Testing database connection...")
    try:
        tables = check_connection(settings.database_url)
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)
        return 1
    logger.info("Database connected successfully, tables: %d %s", len(tables), tables)
    return 0


if __name__ == "__main__":
    sys.exit(main())
