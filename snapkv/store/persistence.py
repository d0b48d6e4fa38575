"""Reading and writing the store document.

The document is JSON::

    {
        "store": {"<key>": {"value": "...", "expire_time": 0}},
        "snapshot_id": 2,
        "snapshots": {"1": {"<key>": {"value": "...", "expire_time": 0}}}
    }

Saves go to a temporary file in the destination directory which is then
moved over the destination, so a failed save never leaves a truncated file.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from ..config.logging import persistence_logger as logger
from ..core.exceptions import DocumentFormatError, PersistenceIOError, SerializationError
from ..models.document import StoreDocument

PathLike = Union[str, os.PathLike]


def encode_document(document: StoreDocument, indent: Optional[int] = 4) -> str:
    try:
        return document.model_dump_json(by_alias=True, indent=indent)
    except PydanticSerializationError as e:
        raise SerializationError(f"Failed to serialize store: {e}")


def decode_document(raw: str, path: Optional[str] = None) -> StoreDocument:
    try:
        return StoreDocument.model_validate_json(raw)
    except PydanticValidationError as e:
        raise DocumentFormatError(f"Malformed store document: {e}", path)


def save_state(path: PathLike, document: StoreDocument, indent: Optional[int] = 4) -> Path:
    """Write ``document`` to ``path`` atomically and return the path."""
    destination = Path(path)
    try:
        payload = encode_document(document, indent)
    except SerializationError as e:
        e.path = str(destination)
        e.details["path"] = str(destination)
        logger.error("Failed to serialize store", path=str(destination), error=e.message)
        raise

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=destination.parent, prefix=f".{destination.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, destination)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        logger.error("Failed to write store document", path=str(destination), error=str(e))
        raise PersistenceIOError(f"Error opening file for writing: {e}", str(destination))

    logger.info("Store document written", path=str(destination), bytes=len(payload))
    return destination


def load_state(path: PathLike) -> Optional[StoreDocument]:
    """Read a document back.

    Returns ``None`` when there is no prior state: the file does not exist or
    is empty. Raises ``PersistenceIOError`` when it exists but cannot be
    read, and ``DocumentFormatError`` when it is not a valid document.
    """
    source = Path(path)
    if not source.exists():
        logger.info("No previous store document", path=str(source))
        return None

    try:
        raw = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentFormatError(f"Store document is not UTF-8 text: {e}", str(source))
    except OSError as e:
        logger.error("Failed to read store document", path=str(source), error=str(e))
        raise PersistenceIOError(f"Error opening file for reading: {e}", str(source))

    if not raw:
        logger.info("Store document is empty", path=str(source))
        return None

    try:
        document = decode_document(raw, str(source))
    except DocumentFormatError as e:
        logger.error("Failed to parse store document", path=str(source), error=e.message)
        raise

    logger.info(
        "Store document read",
        path=str(source),
        keys=len(document.store),
        snapshots=len(document.snapshots),
    )
    return document
