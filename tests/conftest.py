import pytest
from PyQt6.QtCore import QSettings

from core.note_store import NoteStore
from core.persistence import PersistenceGateway


@pytest.fixture
def settings(tmp_path):
    """Isolated INI-backed settings store, so tests never touch the user's data."""
    s = QSettings(str(tmp_path / "thoughtcards.ini"), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture
def gateway(settings):
    return PersistenceGateway(settings)


@pytest.fixture
def store(gateway):
    note_store = NoteStore(gateway)
    note_store.initialize()
    return note_store


def pytest_addoption(parser):
    parser.addoption(
        "--level2", action="store_true", default=False, help="run level 2 tests against the native settings store"
    )

def pytest_collection_modifyitems(config, items):
    if config.getoption("--level2"):
        # --level2 given in cli: do not skip
        return
    skip_level2 = pytest.mark.skip(reason="need --level2 option to run")
    for item in items:
        if "level2" in item.keywords:
            item.add_marker(skip_level2)
