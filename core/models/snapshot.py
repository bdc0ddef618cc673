"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/models/snapshot.py
Version:        1.0.0
Generator:      Antigravity
Description:    Serializable point-in-time view of the note store, handed to
                the presentation layer instead of shared mutable state.
------------------------------------------------------------------------------
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .card import Card
from .document import Document


class StoreSnapshot(BaseModel):
    """Copies of both collections in insertion order."""
    model_config = ConfigDict(frozen=True)

    cards: List[Card] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)

    @property
    def unassigned_cards(self) -> List[Card]:
        return [c for c in self.cards if c.document_id is None]

    @property
    def task_document(self) -> Optional[Document]:
        return next((d for d in self.documents if d.is_task_document), None)
