from company_erp.db.base import Base
from company_erp.db.init_db import init_db
from company_erp.db.session import SessionFactory, build_engine, build_session_factory

__all__ = [
    "Base",
    "SessionFactory",
    "build_engine",
    "build_session_factory",
    "init_db",
]
