"""
Unit of Work pattern implementation.

Provides transaction management and repository coordination
for the service layer with SQLAlchemy.
"""
from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from company_erp.core.exceptions import InternalError
from company_erp.core.logging import get_logger
from company_erp.db.session import SessionFactory
from company_erp.repositories.base import BaseRepository

logger = get_logger(__name__)

TRepository = TypeVar("TRepository", bound=BaseRepository)


class TransactionError(InternalError):
    """Raised when a database transaction fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message, error_type=type(original_error).__name__)
        self.original_error = original_error


class UnitOfWork(AbstractContextManager["UnitOfWork"]):
    """
    Unit of Work for one service use-case.

    Opens a session on enter, commits on a clean exit, rolls back when the
    block raises and always closes the session.

    Usage:
        >>> with UnitOfWork(session_factory) as uow:
        ...     repo = uow.get_repo(EmployeeRepository)
        ...     repo.create({...})
        ...     # Auto-commits on __exit__ if no exception
    """

    def __init__(self, session_factory: SessionFactory, *, auto_commit: bool = True) -> None:
        self._session_factory = session_factory
        self._auto_commit = auto_commit

        self.session: Optional[Session] = None
        self._committed: bool = False
        self._rolled_back: bool = False
        self._repo_cache: dict[Type[BaseRepository], BaseRepository] = {}

    # ------------------------------------------------------------------ #
    # Context manager protocol
    # ------------------------------------------------------------------ #

    def __enter__(self) -> "UnitOfWork":
        if self.session is not None:
            raise RuntimeError("UnitOfWork context already entered")

        self.session = self._session_factory()
        self._committed = False
        self._rolled_back = False
        self._repo_cache.clear()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self.session is None:
            return False

        try:
            if exc_type is None:
                if self._auto_commit and not self._committed and not self._rolled_back:
                    self.commit()
            elif not self._rolled_back:
                self.session.rollback()
                self._rolled_back = True
                logger.debug("unit_of_work_rolled_back", error_type=exc_type.__name__)
        finally:
            self.session.close()
            self.session = None
            self._repo_cache.clear()

        return False

    # ------------------------------------------------------------------ #
    # Transaction control
    # ------------------------------------------------------------------ #

    def commit(self) -> None:
        """
        Explicitly commit the current transaction.

        Raises:
            RuntimeError: If called outside of context
            TransactionError: If commit fails
        """
        if self.session is None:
            raise RuntimeError("UnitOfWork.commit() called outside of context")
        if self._rolled_back:
            raise RuntimeError("Cannot commit a rolled-back transaction")
        if self._committed:
            return

        try:
            self.session.commit()
            self._committed = True
        except SQLAlchemyError as exc:
            logger.error("unit_of_work_commit_failed", error=str(exc))
            self.session.rollback()
            self._rolled_back = True
            raise TransactionError("Failed to commit transaction", exc) from exc

    def rollback(self) -> None:
        if self.session is None:
            raise RuntimeError("UnitOfWork.rollback() called outside of context")
        if self._rolled_back:
            return
        self.session.rollback()
        self._rolled_back = True
        self._committed = False

    # ------------------------------------------------------------------ #
    # Repository factory
    # ------------------------------------------------------------------ #

    def get_repo(self, repo_cls: Type[TRepository]) -> TRepository:
        """
        Get or create a repository bound to this unit's session.

        Repositories are cached per UnitOfWork instance.
        """
        if self.session is None:
            raise RuntimeError("UnitOfWork.get_repo() called outside of context")

        if repo_cls not in self._repo_cache:
            self._repo_cache[repo_cls] = repo_cls(self.session)
        return self._repo_cache[repo_cls]  # type: ignore

    @property
    def is_active(self) -> bool:
        return self.session is not None

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back
