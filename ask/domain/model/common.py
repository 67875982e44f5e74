"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    Repositories return fresh instances; changes are made with
    ``model_copy(update=...)`` and written back through a repository.
    """

    model_config = ConfigDict(frozen=True)
