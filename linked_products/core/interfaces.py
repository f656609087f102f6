"""
Base repository contract
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Union

T = TypeVar('T')
K = TypeVar('K')

class IRepository(Generic[T, K], ABC):
    """Base interface shared by every repository"""

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Return an entity by ID"""
        pass

    @abstractmethod
    def get_all(self, **filters) -> List[T]:
        """Return every entity matching the optional filters"""
        pass

    @abstractmethod
    def create(self, entity: Union[T, dict]) -> T:
        """Persist a new entity"""
        pass
