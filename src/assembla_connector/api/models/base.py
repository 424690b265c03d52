"""Base model configuration for all Assembla models."""

from pydantic import BaseModel, ConfigDict


class AssemblaModel(BaseModel):
    """Base model with common configuration.

    All Assembla API models should inherit from this class to get:
    - populate_by_name: Allow both alias and field name in input
    - extra="ignore": Ignore unknown fields from API responses

    Field defaults are the type's natural default so that the encoder can
    leave them out of request bodies.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
