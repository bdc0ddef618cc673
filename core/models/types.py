"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/models/types.py
Version:        1.0.0
Generator:      Antigravity
Description:    Shared field types and validators for the record models.
------------------------------------------------------------------------------
"""

import uuid
from typing import Optional


def validate_uuid_string(value: Optional[str]) -> Optional[str]:
    """
    Ensures an identifier is a UUID string. The stored spelling is kept as is
    (e.g. upper-case ids written by other clients), so ids round-trip unchanged.

    Raises:
        ValueError: If the value is not a parseable UUID.
    """
    if value is None:
        return value
    try:
        uuid.UUID(value)
    except ValueError as e:
        raise ValueError(f"'{value}' is not a valid UUID") from e
    return value
