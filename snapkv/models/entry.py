"""Stored value model."""

from typing import Any, Dict

from pydantic import ConfigDict, Field

from ..utils.date_utils import NEVER_EXPIRES, calculate_expiry, is_expired
from .base import SnapKVBaseModel


class Entry(SnapKVBaseModel):
    """A value plus the epoch second after which it is no longer visible.

    Entries are immutable, so copies of a store can share them freely.
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Stored value")
    expires_at: int = Field(
        default=NEVER_EXPIRES,
        ge=0,
        strict=True,
        alias="expire_time",
        description="Absolute expiry in epoch seconds (0 = never expires)",
    )

    @classmethod
    def create(cls, value: str, ttl_seconds: int, now: int) -> "Entry":
        """Build an entry whose expiry is ``now + ttl_seconds`` (never if ttl <= 0)."""
        return cls(value=value, expires_at=calculate_expiry(ttl_seconds, now))

    @property
    def never_expires(self) -> bool:
        return self.expires_at == NEVER_EXPIRES

    def is_expired(self, now: int) -> bool:
        return is_expired(self.expires_at, now)

    def to_document(self) -> Dict[str, Any]:
        """Persisted shape: ``{"value": ..., "expire_time": ...}``."""
        return self.model_dump(by_alias=True)
