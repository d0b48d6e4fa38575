"""Reversible mutation records kept by the undo/redo log.

An action is one of two flat variants distinguished by ``kind``. Each carries
exactly what is needed to replay it or to invert it.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import ConfigDict, Field

from .base import SnapKVBaseModel
from .entry import Entry


class SetAction(SnapKVBaseModel):
    """A ``set`` of ``key``. ``prior`` is ``None`` when the key did not exist."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["set"] = "set"
    key: str
    prior: Optional[Entry] = None
    new: Entry


class DeleteAction(SnapKVBaseModel):
    """A ``delete`` of a key that was present, remembering what was removed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["delete"] = "delete"
    key: str
    prior: Entry


Action = Annotated[Union[SetAction, DeleteAction], Field(discriminator="kind")]
