"""SQLAlchemy Base class for all models."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def import_models() -> None:
    """Import all models so they are registered on ``Base.metadata``."""
    from company_erp.models.employee import Employee  # noqa: F401
    from company_erp.models.leave import LeaveRequest  # noqa: F401
