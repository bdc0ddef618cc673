"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/exceptions.py
Version:        1.0.0
Generator:      Antigravity
Description:    Exception types raised by the persistence codec. They never
                leave the persistence gateway; save/load log them and
                degrade to defaults.
------------------------------------------------------------------------------
"""

from typing import Optional


class ThoughtCardsError(Exception):
    """Base class for all ThoughtCards errors."""


class PersistenceError(ThoughtCardsError):
    """A stored collection could not be converted to or from its JSON blob."""

    def __init__(self, kind: object, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{getattr(kind, 'value', kind)}: {message}")
        self.kind = kind
        self.cause = cause


class EncodeFailure(PersistenceError):
    """Collection could not be serialized. The stored value stays untouched."""


class DecodeFailure(PersistenceError):
    """Stored blob is unreadable or does not match the record schema."""
