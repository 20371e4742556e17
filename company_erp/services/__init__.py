"""
Service layer root package.

Each subpackage implements application use-cases on top of:

- SQLAlchemy models (company_erp.models.*)
- Repositories (company_erp.repositories.*)
- Pydantic schemas (company_erp.schemas.*)
- Common service infrastructure (company_erp.services.common.*)

Typical pattern for a service:

    class SomeService:
        def __init__(self, session_factory: Callable[[], Session]) -> None:
            self._session_factory = session_factory

        def some_use_case(...):
            with UnitOfWork(self._session_factory) as uow:
                repo = uow.get_repo(SomeRepository)
                ...
"""

from company_erp.services.common import UnitOfWork

__all__ = ["UnitOfWork"]
