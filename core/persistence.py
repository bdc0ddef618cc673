"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/persistence.py
Version:        1.0.0
Generator:      Antigravity
Description:    Persistence gateway for the card and document collections.
                Each collection is stored as one JSON blob under a fixed key
                in the platform key-value store (QSettings). Failures are
                logged and degrade to defaults, never raised to the caller.
------------------------------------------------------------------------------
"""

from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from PyQt6.QtCore import QByteArray, QSettings

from core.exceptions import DecodeFailure, EncodeFailure
from core.logger import get_logger, log_collection_io
from core.models.card import Card
from core.models.document import Document

logger = get_logger("persistence")

Record = Union[Card, Document]


class CollectionKind(str, Enum):
    """The two independently keyed collections."""
    CARDS = "saved_cards"
    DOCUMENTS = "saved_documents"


class LoadStatus(str, Enum):
    """How load() produced its result."""
    STORED = "stored"  # decoded as stored
    SEEDED = "seeded"  # decoded, default task document appended
    ABSENT = "absent"  # nothing stored, defaults
    DECODE_FAILED = "decode_failed"  # unreadable blob, defaults

    @property
    def needs_write_back(self) -> bool:
        """Defaults created here are not yet stored. A failed decode is left alone."""
        return self in (LoadStatus.SEEDED, LoadStatus.ABSENT)


_MODELS: Dict[CollectionKind, type] = {
    CollectionKind.CARDS: Card,
    CollectionKind.DOCUMENTS: Document,
}

_ADAPTERS: Dict[CollectionKind, TypeAdapter] = {
    CollectionKind.CARDS: TypeAdapter(List[Card]),
    CollectionKind.DOCUMENTS: TypeAdapter(List[Document]),
}


class PersistenceGateway:
    """
    Stateless encode/decode bridge between the note store and QSettings.
    Holds no records between calls; every save overwrites the whole blob.
    """

    def __init__(self, settings: QSettings) -> None:
        """
        Initializes the gateway.

        Args:
            settings: The key-value store to read and write blobs from.
        """
        self.settings: QSettings = settings

    # --- Codec ---

    def encode(self, kind: CollectionKind, records: Sequence[Record]) -> str:
        """
        Serializes a full collection to its JSON text form.

        Raises:
            EncodeFailure: If a record has the wrong type or cannot be serialized.
        """
        model = _MODELS[kind]
        for record in records:
            if not isinstance(record, model):
                raise EncodeFailure(kind, f"expected {model.__name__}, got {type(record).__name__}")
        try:
            return _ADAPTERS[kind].dump_json(list(records), by_alias=True).decode("utf-8")
        except (PydanticSerializationError, ValueError, TypeError) as e:
            raise EncodeFailure(kind, str(e), cause=e) from e

    def decode(self, kind: CollectionKind, raw: Any) -> List[Any]:
        """
        Parses a stored blob back into records. All-or-nothing: a single bad
        record rejects the whole blob.

        Raises:
            DecodeFailure: If the blob is not valid JSON or does not match the schema.
        """
        if isinstance(raw, QByteArray):
            raw = bytes(raw)
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = bytes(raw).decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeFailure(kind, "blob is not valid UTF-8", cause=e) from e
        if not isinstance(raw, str):
            raise DecodeFailure(kind, f"unexpected stored type {type(raw).__name__}")
        try:
            return _ADAPTERS[kind].validate_json(raw)
        except ValidationError as e:
            raise DecodeFailure(kind, f"{e.error_count()} validation error(s)", cause=e) from e

    # --- Storage ---

    def save(self, kind: CollectionKind, records: Sequence[Record]) -> bool:
        """
        Writes the whole collection under its fixed key.

        Returns:
            True on success. False if encoding or writing failed; the previously
            stored value is left as it was.
        """
        try:
            blob = self.encode(kind, records)
        except EncodeFailure as e:
            logger.error(f"Failed to save {kind.value}: {e}")
            return False

        self.settings.setValue(kind.value, blob)
        self.settings.sync()
        if self.settings.status() != QSettings.Status.NoError:
            logger.error(f"Failed to save {kind.value}: settings status {self.settings.status().name}")
            return False

        log_collection_io(kind.value, "save", len(records))
        return True

    def load(self, kind: CollectionKind) -> List[Any]:
        """
        Reads a collection, substituting defaults when the blob is absent or
        unreadable. Documents always come back with a task document.
        """
        records, _ = self.load_with_status(kind)
        return records

    def load_with_status(self, kind: CollectionKind) -> Tuple[List[Any], LoadStatus]:
        """
        Like load(), but also reports where the records came from so the
        caller can decide whether the result needs to be written back.

        Returns:
            The records and a LoadStatus.
        """
        if not self.settings.contains(kind.value):
            logger.debug(f"No stored value for {kind.value}, using defaults")
            return self._defaults(kind), LoadStatus.ABSENT

        try:
            records = self.decode(kind, self.settings.value(kind.value))
        except DecodeFailure as e:
            logger.warning(f"Failed to load {kind.value}: {e}")
            return self._defaults(kind), LoadStatus.DECODE_FAILED

        status = LoadStatus.STORED
        if kind is CollectionKind.DOCUMENTS and not any(d.is_task_document for d in records):
            logger.info("Stored documents contain no task document, adding default 'Tasks'")
            records.append(Document.default_task_document())
            status = LoadStatus.SEEDED

        log_collection_io(kind.value, "load", len(records))
        return records, status

    def clear(self, kind: CollectionKind) -> None:
        """Removes a stored collection entirely."""
        self.settings.remove(kind.value)
        self.settings.sync()

    @staticmethod
    def _defaults(kind: CollectionKind) -> List[Any]:
        if kind is CollectionKind.DOCUMENTS:
            return [Document.default_task_document()]
        return []

    # --- Convenience wrappers ---

    def save_cards(self, cards: Sequence[Card]) -> bool:
        return self.save(CollectionKind.CARDS, cards)

    def load_cards(self) -> List[Card]:
        return self.load(CollectionKind.CARDS)

    def save_documents(self, documents: Sequence[Document]) -> bool:
        return self.save(CollectionKind.DOCUMENTS, documents)

    def load_documents(self) -> List[Document]:
        return self.load(CollectionKind.DOCUMENTS)

    def load_documents_with_status(self) -> Tuple[List[Document], LoadStatus]:
        return self.load_with_status(CollectionKind.DOCUMENTS)
