"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/models/card.py
Version:        1.0.0
Generator:      Antigravity
Description:    Data model for a captured thought (Card). Cards live in the
                capture stream until they are assigned to a document or
                merged into a document body.
------------------------------------------------------------------------------
"""

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import validate_uuid_string


class Card(BaseModel):
    """
    A short, timestamped text snippet.
    A card without a document_id is 'unassigned' and shows up in the stream.
    Identity is the id alone; content and dates do not take part in equality.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), frozen=True)
    content: str
    creation_date: datetime = Field(default_factory=datetime.now, alias="creationDate", frozen=True)

    # None means the card is still in the capture stream
    document_id: Optional[str] = Field(default=None, alias="documentID")

    @field_validator("id", "document_id")
    @classmethod
    def check_uuid(cls, v: Optional[str]) -> Optional[str]:
        return validate_uuid_string(v)

    @property
    def is_assigned(self) -> bool:
        return self.document_id is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
