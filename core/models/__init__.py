"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/models/__init__.py
Version:        1.0.0
Generator:      Antigravity
Description:    Package initializer for core data models. Exports Card,
                Document and StoreSnapshot for easy access.
------------------------------------------------------------------------------
"""

from .card import Card
from .document import Document
from .snapshot import StoreSnapshot
