from database import engine, Base
import models  # noqa: F401  registers the tables on Base.metadata
import logging

logger = logging.getLogger(__name__)


def init_database(bind=None):
    """Create any missing tables. Existing tables and rows are left alone."""
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info(f"✅ Database initialized ({len(Base.metadata.tables)} tables)")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
