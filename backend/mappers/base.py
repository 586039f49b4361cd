"""Base mapper protocol between request/response DTOs and ORM entities."""

from typing import Protocol, TypeVar, runtime_checkable

TRequest = TypeVar("TRequest", contravariant=True)  # Incoming DTO (Pydantic model)
TEntity = TypeVar("TEntity")  # SQLAlchemy model
TResponse = TypeVar("TResponse", covariant=True)  # Outgoing DTO (Pydantic model)


@runtime_checkable
class Mapper(Protocol[TRequest, TEntity, TResponse]):
    """Protocol for mapping between DTOs and persistence entities.

    Both directions are pure: no session access and no side effects.
    Absent optional fields map to the entity defaults.
    """

    def to_entity(self, dto: TRequest) -> TEntity:
        """Convert an incoming DTO to a new, unsaved entity."""
        ...

    def to_dto(self, entity: TEntity) -> TResponse:
        """Convert an entity to its outgoing DTO."""
        ...
