"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type, Any
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import DatabaseError
from .specifications import Specification

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Writes are flushed immediately so generated ids and defaults are
    visible to the caller; committing is left to the session owner.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def _flush(self, operation: str) -> None:
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{self.model.__name__} {operation} failed: {e}")
            raise DatabaseError(operation, f"Could not {operation} {self.model.__name__}: {e}") from e

    def save(self, obj: T) -> T:
        """
        Insert or update a record and flush it.

        Args:
            obj: Model instance to persist

        Returns:
            The persisted instance, with generated values populated

        Raises:
            DatabaseError: If the flush violates a constraint
        """
        self.db.add(obj)
        self._flush("save")
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        Retrieve all records ordered by primary key.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of model instances
        """
        query = self.db.query(self.model).order_by(self.model.id)
        if limit:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        return query.all()

    def find_by(self, spec: Specification[T]) -> List[T]:
        """
        Retrieve the records matching a specification.

        Args:
            spec: Specification translated to a SQL filter

        Returns:
            List of matching model instances
        """
        return self.db.query(self.model).filter(spec.to_sql_filter()).order_by(self.model.id).all()

    def exists(self, id: Any) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        return self.db.query(self.model).filter(self.model.id == id).count() > 0

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    def delete(self, obj: T) -> None:
        """
        Delete a record (and its cascaded children) from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self._flush("delete")

    def delete_by_id(self, id: Any) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.delete(obj)
        return True

    def delete_all(self) -> int:
        """
        Delete every record through the ORM so cascades apply.

        Returns:
            Number of records deleted
        """
        records = self.db.query(self.model).all()
        for obj in records:
            self.db.delete(obj)
        self._flush("delete")
        return len(records)
