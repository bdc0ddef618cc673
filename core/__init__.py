"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/__init__.py
Version:        1.0.0
Generator:      Antigravity
Description:    Core logic package for ThoughtCards. Contains the card and
                document models, the note store and its persistence.
------------------------------------------------------------------------------
"""
