"""
------------------------------------------------------------------------------
Project:        ThoughtCards
File:           core/bootstrap.py
Version:        1.0.0
Generator:      Antigravity
Description:    Application wiring. Sets up configuration and logging, then
                builds the persistence gateway and an initialized note store
                for the presentation layer.
------------------------------------------------------------------------------
"""

from typing import Optional

from core.config import AppConfig
from core.logger import get_logger, setup_logging
from core.note_store import NoteStore
from core.persistence import PersistenceGateway


def init_application(profile: Optional[str] = None, app_config: Optional[AppConfig] = None) -> NoteStore:
    """
    Initializes infrastructure and returns a ready-to-use note store.

    Args:
        profile: Optional profile for isolated settings (ignored if app_config is given).
        app_config: Pre-built configuration, mainly for tests.

    Returns:
        A NoteStore loaded from the configured settings store.
    """
    if app_config is None:
        app_config = AppConfig(profile=profile)

    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("core")
    logger.info(f"ThoughtCards started (Profile: {app_config.profile or 'default'})")

    gateway = PersistenceGateway(app_config.settings)
    store = NoteStore(gateway)
    store.initialize()
    return store
