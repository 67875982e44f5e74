"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value. Hashable so targets can key dicts."""

    model_config = ConfigDict(frozen=True)
