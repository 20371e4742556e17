# company_erp/db/init_db.py
"""Database initialization utilities."""
from sqlalchemy.engine import Engine

from company_erp.core.logging import get_logger
from company_erp.db.base import Base, import_models

logger = get_logger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create any missing tables.

    Suitable for development and testing; production schemas are expected
    to be managed by migrations.
    """
    import_models()
    Base.metadata.create_all(bind=engine)
    logger.info("database_initialized", tables=sorted(Base.metadata.tables))

