"""
Base repository interface and exceptions.

Defines the abstract interface for all repositories following DDD patterns.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar


# Generic type for domain models
T = TypeVar("T")


class RepositoryException(Exception):
    """Base exception for repository operations."""
    pass


class NotFoundError(RepositoryException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository interface.

    Write operations report success as a boolean: True only when the
    database acknowledged the write and it touched at least one document.
    """

    @abstractmethod
    async def get(self, entity_id: str) -> Optional[T]:
        """
        Get an entity by ID.

        Args:
            entity_id: The ID of the entity to retrieve

        Returns:
            The entity, or None if it does not exist
        """
        pass

    @abstractmethod
    async def list(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        List entities with optional pagination.

        Args:
            limit: Maximum number of entities to return, None for all
            offset: Number of entities to skip

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """
        Create a new entity.

        Args:
            entity: The entity to create

        Returns:
            The created entity
        """
        pass

    @abstractmethod
    async def update(self, entity_id: str, entity: T) -> bool:
        """
        Replace an entity, inserting it when it does not exist yet.

        Args:
            entity_id: The ID of the entity to replace
            entity: The new entity data

        Returns:
            True if an existing entity was modified
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """
        Delete an entity.

        Args:
            entity_id: The ID of the entity to delete

        Returns:
            True if an entity was deleted
        """
        pass

    @abstractmethod
    async def delete_all(self) -> bool:
        """
        Delete every entity.

        Returns:
            True if at least one entity was deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Get the total count of entities.

        Returns:
            Total number of entities
        """
        pass
