"""
SQLAlchemy plumbing shared by the storefront repositories
"""
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from linked_products.core.exceptions import InfrastructureException, NotFoundException
from linked_products.core.interfaces import IRepository

T = TypeVar('T')
K = TypeVar('K')


class BaseRepository(Generic[T, K], IRepository[T, K]):
    """Lookups and inserts for a single mapped model"""

    def __init__(self, session: Session, model_class: Type[T]):
        self._session = session
        self._model_class = model_class
        self._entity_name = model_class.__name__

    @property
    def session(self) -> Session:
        return self._session

    @contextmanager
    def _database_errors(self, action: str, *, rollback: bool = False) -> Iterator[None]:
        """Turn driver errors into InfrastructureException"""
        try:
            yield
        except SQLAlchemyError as e:
            if rollback:
                self._session.rollback()
            raise InfrastructureException(
                f"Database error {action} {self._entity_name}: {e}",
                details={"entity_type": self._entity_name},
            ) from e

    def _primary_key(self):
        return inspect(self._model_class).primary_key[0]

    def get_by_id(self, id: K) -> Optional[T]:
        with self._database_errors("retrieving"):
            return self._session.query(self._model_class).filter(self._primary_key() == id).first()

    def get_by_id_or_raise(self, id: K) -> T:
        entity = self.get_by_id(id)
        if entity is None:
            raise NotFoundException(self._entity_name, id)
        return entity

    def get_all(self, **filters) -> List[T]:
        """Entities matching ``filters``; lists mean IN, strings with % mean LIKE"""
        with self._database_errors("listing"):
            return self._filtered(self._session.query(self._model_class), filters).all()

    def create(self, entity: Union[T, Mapping[str, Any]]) -> T:
        if isinstance(entity, Mapping):
            entity = self._model_class(**entity)
        elif not isinstance(entity, self._model_class):
            raise TypeError(f"Cannot create {self._entity_name} from {type(entity).__name__}")

        with self._database_errors("creating", rollback=True):
            self._session.add(entity)
            self._session.commit()
            self._session.refresh(entity)
        return entity

    def _filtered(self, query: Query, filters: Dict[str, Any]) -> Query:
        for field_name, value in filters.items():
            column = getattr(self._model_class, field_name, None)
            if value is None or column is None:
                continue
            if isinstance(value, (list, tuple, set)):
                query = query.filter(column.in_(list(value)))
            elif isinstance(value, str) and '%' in value:
                query = query.filter(column.like(value))
            else:
                query = query.filter(column == value)
        return query
