"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/note_store.py
Version:        1.0.0
Generator:      Antigravity
Description:    The note store: sole owner of the card and document
                collections. Every command mutates in memory and then
                explicitly persists the affected collection through the
                persistence gateway. Unknown ids are silent no-ops.
------------------------------------------------------------------------------
"""

from typing import List, Optional, Tuple, Union

from core.logger import get_logger
from core.models.card import Card
from core.models.document import TASK_BULLET, Document
from core.models.snapshot import StoreSnapshot
from core.persistence import PersistenceGateway

logger = get_logger("store")

CardRef = Union[Card, str]
DocumentRef = Union[Document, str]


def merge_content(document: Document, text: str, position: Optional[int] = None) -> str:
    """
    Computes the body of a document after merging a card's text into it.

    Task documents collect bullets: the first card becomes '• text', every
    further card is appended on its own '• ' line. The position is ignored.

    Regular documents insert the text verbatim at the given offset, clamped to
    [0, len(content)]. Offsets count code points (Python str indices), not
    grapheme clusters: an emoji with a skin-tone modifier is two positions, and
    an offset between them splits it. Editors that track cursors in UTF-16 units
    must convert before calling. Without a position the text is appended as
    a new paragraph (or becomes the body of an empty document).

    Args:
        document: The target document (only its content and task flag are read).
        text: The card content to merge.
        position: Optional code point offset for regular documents.

    Returns:
        The new document content.
    """
    content = document.content

    if document.is_task_document:
        if not content:
            return f"{TASK_BULLET}{text}"
        return f"{content}\n{TASK_BULLET}{text}"

    if position is not None:
        offset = max(0, min(position, len(content)))
        return content[:offset] + text + content[offset:]

    if not content:
        return text
    return f"{content}\n\n{text}"


def _ref_id(ref: Union[CardRef, DocumentRef]) -> str:
    return ref if isinstance(ref, str) else ref.id


class NoteStore:
    """
    Single mutable source of truth for cards and documents.

    Callers receive copies (or a StoreSnapshot) and issue commands keyed by id;
    they never hold references into the store's own collections. Commands
    return True when something changed and False for a reference miss.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        """
        Args:
            gateway: Persistence gateway used for loading and every save.
        """
        self.gateway = gateway
        self._cards: List[Card] = []
        self._documents: List[Document] = []

    # --- Lifecycle ---

    def initialize(self) -> None:
        """
        Loads both collections and guarantees exactly one task document.
        Safe to call again; in-memory state is replaced by what is stored.
        """
        documents, status = self.gateway.load_documents_with_status()
        cards = self.gateway.load_cards()

        documents, repaired = self._ensure_single_task_document(documents)
        self._documents = documents
        self._cards = cards

        # A seeded "Tasks" document must be stored so its id stays stable across
        # restarts. An unreadable blob is left in place.
        if repaired or status.needs_write_back:
            self._persist_documents()

        logger.info(f"Note store initialized: {len(self._cards)} card(s), {len(self._documents)} document(s)")

    @staticmethod
    def _ensure_single_task_document(documents: List[Document]) -> Tuple[List[Document], bool]:
        task_indices = [i for i, doc in enumerate(documents) if doc.is_task_document]

        if not task_indices:
            logger.info("No task document found, creating default 'Tasks'")
            return documents + [Document.default_task_document()], True

        if len(task_indices) > 1:
            # Keep the first task document; demote the others to regular ones
            result = list(documents)
            for i in task_indices[1:]:
                logger.warning(f"Demoting extra task document '{result[i].name}' ({result[i].id})")
                result[i] = result[i].model_copy(update={"is_task_document": False})
            return result, True

        return documents, False

    # --- Queries ---

    @property
    def cards(self) -> List[Card]:
        return [c.model_copy() for c in self._cards]

    @property
    def documents(self) -> List[Document]:
        return [d.model_copy() for d in self._documents]

    def snapshot(self) -> StoreSnapshot:
        """Returns a detached copy of both collections."""
        return StoreSnapshot(cards=self.cards, documents=self.documents)

    def unassigned_cards(self) -> List[Card]:
        """Cards in the capture stream, in insertion order."""
        return [c.model_copy() for c in self._cards if c.document_id is None]

    def cards_for_document(self, document_id: DocumentRef) -> List[Card]:
        """Cards assigned to the given document, in insertion order."""
        doc_id = _ref_id(document_id)
        return [c.model_copy() for c in self._cards if c.document_id == doc_id]

    def card_by_id(self, card_id: str) -> Optional[Card]:
        card = self._find_card(card_id)
        return card.model_copy() if card else None

    def document_by_id(self, document_id: str) -> Optional[Document]:
        doc = self._find_document(document_id)
        return doc.model_copy() if doc else None

    def task_document(self) -> Optional[Document]:
        doc = next((d for d in self._documents if d.is_task_document), None)
        return doc.model_copy() if doc else None

    # --- Card commands ---

    def add_card(self, content: str) -> Optional[Card]:
        """
        Appends a new unassigned card.

        Returns:
            A copy of the new card, or None if the content is blank.
        """
        if not content or not content.strip():
            logger.debug("Rejected card with empty content")
            return None

        card = Card(content=content)
        self._cards.append(card)
        self._persist_cards()
        logger.debug(f"Added card {card.id}")
        return card.model_copy()

    def assign_card(self, card: CardRef, document_id: DocumentRef) -> bool:
        """Points a card at a document. The card stays alive."""
        target = self._find_card(_ref_id(card))
        if target is None:
            return self._miss("assign_card", "card", _ref_id(card))

        target.document_id = _ref_id(document_id)
        self._persist_cards()
        logger.debug(f"Assigned card {target.id} to document {target.document_id}")
        return True

    def unassign_card(self, card: CardRef) -> bool:
        """Returns a card to the capture stream."""
        target = self._find_card(_ref_id(card))
        if target is None:
            return self._miss("unassign_card", "card", _ref_id(card))

        target.document_id = None
        self._persist_cards()
        logger.debug(f"Unassigned card {target.id}")
        return True

    def move_card_content_to_document(
        self, card: CardRef, document: DocumentRef, position: Optional[int] = None
    ) -> bool:
        """
        Merges the card's content into the document body and deletes the card.
        Assignment state of the card does not matter.

        Args:
            card: The card (or its id) to consume.
            document: The target document (or its id).
            position: Character offset for regular documents; ignored for the task document.
        """
        target_doc = self._find_document(_ref_id(document))
        if target_doc is None:
            return self._miss("move_card_content_to_document", "document", _ref_id(document))

        source = self._find_card(_ref_id(card))
        if source is None:
            return self._miss("move_card_content_to_document", "card", _ref_id(card))

        target_doc.content = merge_content(target_doc, source.content, position)
        self._cards = [c for c in self._cards if c.id != source.id]

        self._persist_documents()
        self._persist_cards()
        logger.debug(f"Moved card {source.id} into document {target_doc.id}")
        return True

    # --- Document commands ---

    def add_document(self, name: str) -> Optional[Document]:
        """
        Appends a new, empty regular document.

        Returns:
            A copy of the new document, or None if the name is blank.
        """
        if not name or not name.strip():
            logger.debug("Rejected document with empty name")
            return None

        doc = Document(name=name)
        self._documents.append(doc)
        self._persist_documents()
        logger.debug(f"Added document {doc.id} '{doc.name}'")
        return doc.model_copy()

    def rename_document(self, document: DocumentRef, name: str) -> bool:
        target = self._find_document(_ref_id(document))
        if target is None:
            return self._miss("rename_document", "document", _ref_id(document))
        if not name or not name.strip():
            logger.debug(f"Rejected blank name for document {target.id}")
            return False

        target.name = name
        self._persist_documents()
        return True

    def update_document_content(self, document: DocumentRef, content: str) -> bool:
        """Overwrites the document body, as done by direct editing."""
        target = self._find_document(_ref_id(document))
        if target is None:
            return self._miss("update_document_content", "document", _ref_id(document))
        if target.content == content:
            return False

        target.content = content
        self._persist_documents()
        return True

    def delete_document(self, document: DocumentRef) -> bool:
        """
        Removes a document and returns its cards to the capture stream.
        The task document cannot be deleted.
        """
        target = self._find_document(_ref_id(document))
        if target is None:
            return self._miss("delete_document", "document", _ref_id(document))
        if target.is_task_document:
            logger.warning(f"Refusing to delete task document {target.id}")
            return False

        released = 0
        for card in self._cards:
            if card.document_id == target.id:
                card.document_id = None
                released += 1

        self._documents = [d for d in self._documents if d.id != target.id]

        self._persist_documents()
        if released:
            self._persist_cards()
        logger.debug(f"Deleted document {target.id}, unassigned {released} card(s)")
        return True

    # --- Drop commands ---

    def drop_card_on_document(self, card_id: str, document_id: str) -> bool:
        """
        A card dropped on a document in the document list.
        The task document consumes the card; other documents get it assigned.
        """
        target_doc = self._find_document(document_id)
        if target_doc is None:
            return self._miss("drop_card_on_document", "document", document_id)
        if self._find_card(card_id) is None:
            return self._miss("drop_card_on_document", "card", card_id)

        if target_doc.is_task_document:
            return self.move_card_content_to_document(card_id, document_id)
        return self.assign_card(card_id, document_id)

    def drop_card_into_document(self, card_id: str, document_id: str, cursor_position: Optional[int]) -> bool:
        """A card dropped into an open document editor at the cursor."""
        return self.move_card_content_to_document(card_id, document_id, position=cursor_position)

    # --- Internals ---

    def _find_card(self, card_id: str) -> Optional[Card]:
        return next((c for c in self._cards if c.id == card_id), None)

    def _find_document(self, document_id: str) -> Optional[Document]:
        return next((d for d in self._documents if d.id == document_id), None)

    @staticmethod
    def _miss(operation: str, kind: str, ref_id: str) -> bool:
        logger.debug(f"{operation}: no {kind} with id {ref_id}, nothing changed")
        return False

    def _persist_cards(self) -> None:
        self.gateway.save_cards(self._cards)

    def _persist_documents(self) -> None:
        self.gateway.save_documents(self._documents)
