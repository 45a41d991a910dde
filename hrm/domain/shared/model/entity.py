"""Base classes for domain entities and aggregates."""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """A domain object with identity.

    Entities are validated on assignment so state changes go through the
    same type checks as construction.
    """

    model_config = ConfigDict(validate_assignment=True)


class Aggregate(Entity):
    """Root entity of a consistency boundary. Repositories load and save aggregates."""
