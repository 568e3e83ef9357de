"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model; changes go through `model_copy(update=...)`."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
