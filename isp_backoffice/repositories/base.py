"""
Generic Repository Pattern.
Provides the basic CRUD operations for any SQLAlchemy model.
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from isp_backoffice.extensions import db

# Generic type T bound to a SQLAlchemy model
T = TypeVar("T", bound=db.Model)

# primary keys are unsigned 32-bit; larger ids cannot exist
MAX_ID = 4294967295


class SqlAlchemyRepository(Generic[T]):
    def __init__(self, session, model_cls: Type[T]):
        self.session = session
        self.model_cls = model_cls

    def add(self, entity: T) -> T:
        """Adds the entity to the session and flushes to obtain its id."""
        self.session.add(entity)
        self.session.flush()
        return entity

    def create(self, fields: Dict[str, Any]) -> T:
        """Builds a new row from a field mapping and adds it."""
        return self.add(self.model_cls(**fields))

    def update(self, entity: T, fields: Dict[str, Any]) -> T:
        """Copies the given fields on an entity already in the session."""
        for name, value in fields.items():
            setattr(entity, name, value)
        self.session.flush()
        return entity

    def get_by_id(self, id: int) -> Optional[T]:
        """Fetch by primary key; None for ids outside the key range."""
        if id < 1 or id > MAX_ID:
            return None
        return self.session.get(self.model_cls, id)

    def list_all(self) -> List[T]:
        """All rows, ordered by id."""
        return self.session.query(self.model_cls).order_by(self.model_cls.id.asc()).all()

    def delete(self, entity: T) -> None:
        """Deletes the entity."""
        self.session.delete(entity)
        self.session.flush()
