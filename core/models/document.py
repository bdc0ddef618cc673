"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/models/document.py
Version:        1.0.0
Generator:      Antigravity
Description:    Data model for a named text container (Document). One document
                per collection is the distinguished task document, which
                collects merged cards as a bulleted list.
------------------------------------------------------------------------------
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import validate_uuid_string

TASK_DOCUMENT_NAME = "Tasks"
TASK_BULLET = "• "


class Document(BaseModel):
    """
    A named document with a free-form body.
    The task flag is fixed at creation; a document cannot become (or stop
    being) the task document through assignment.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), frozen=True)
    name: str
    content: str = ""
    is_task_document: bool = Field(default=False, alias="isTaskDocument", frozen=True)
    creation_date: datetime = Field(default_factory=datetime.now, alias="creationDate", frozen=True)

    @field_validator("id")
    @classmethod
    def check_uuid(cls, v: str) -> str:
        return validate_uuid_string(v)

    @classmethod
    def default_task_document(cls) -> "Document":
        """Creates the empty 'Tasks' document used to seed a fresh collection."""
        return cls(name=TASK_DOCUMENT_NAME, content="", is_task_document=True)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
