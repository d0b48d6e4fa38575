"""Base model class for SnapKV records."""

from pydantic import BaseModel, ConfigDict


class SnapKVBaseModel(BaseModel):
    """Base model with common configuration for all SnapKV models."""

    model_config = ConfigDict(
        # Keep enum objects in memory, serialize values only when needed
        use_enum_values=False,
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        # Unknown fields in a document are a format error, not silently dropped
        extra="forbid",
    )
