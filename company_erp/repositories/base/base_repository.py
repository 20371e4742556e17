"""
Base repository with standardized CRUD operations.

Repositories wrap a single SQLAlchemy session; committing is the job of the
surrounding unit of work, so writes here only flush.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from company_erp.core.logging import get_logger
from company_erp.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository providing lookups, creation and field updates.
    """

    model: Type[ModelType]

    def __init__(self, db: Session, model: Optional[Type[ModelType]] = None):
        """
        Initialize repository.

        Args:
            db: Database session
            model: SQLAlchemy model class (defaults to the class attribute)
        """
        self.db = db
        if model is not None:
            self.model = model

    # ==================== Read Operations ====================

    def _select(self) -> Select:
        return select(self.model)

    def get(self, entity_id: Any) -> Optional[ModelType]:
        """Get entity by primary key, or None."""
        if entity_id is None:
            return None
        return self.db.get(self.model, entity_id)

    def find_one_by(self, **filters: Any) -> Optional[ModelType]:
        """Get the first entity whose columns equal ``filters``."""
        stmt = self._select().filter_by(**filters).limit(1)
        return self.db.scalars(stmt).first()

    def find_by(self, **filters: Any) -> List[ModelType]:
        """Get every entity whose columns equal ``filters``, oldest first."""
        stmt = self._select().filter_by(**filters).order_by(self.model.created_at)
        return list(self.db.scalars(stmt).all())

    # ==================== Write Operations ====================

    def create(self, data: Dict[str, Any]) -> ModelType:
        """
        Create a new entity from ``data`` and flush it.

        Returns:
            Created entity with its primary key populated
        """
        entity = self.model(**data)
        self.db.add(entity)
        self.db.flush()
        logger.debug("entity_created", model=self.model.__name__, entity_id=entity.id)
        return entity

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """Set ``data`` on ``entity`` and flush."""
        for field, value in data.items():
            setattr(entity, field, value)
        self.db.flush()
        logger.debug("entity_updated", model=self.model.__name__, entity_id=entity.id, fields=sorted(data))
        return entity
