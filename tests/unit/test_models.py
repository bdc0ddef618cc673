import pytest
from datetime import datetime
from pydantic import ValidationError

from core.models import Card, Document, StoreSnapshot


def test_card_creation_defaults():
    """A new card gets an id and timestamp and starts unassigned."""
    before = datetime.now()
    card = Card(content="Buy milk")

    assert card.id
    assert card.content == "Buy milk"
    assert card.document_id is None
    assert not card.is_assigned
    assert before <= card.creation_date <= datetime.now()

def test_card_ids_are_unique():
    assert Card(content="a").id != Card(content="a").id

def test_card_equality_is_by_id_only():
    card = Card(content="original")
    edited = card.model_copy(update={"content": "changed", "document_id": "doc-1"})

    assert card == edited
    assert hash(card) == hash(edited)
    assert card != Card(content="original")

def test_card_id_and_date_are_frozen():
    card = Card(content="x")
    with pytest.raises(ValidationError):
        card.id = "other"
    with pytest.raises(ValidationError):
        card.creation_date = datetime(2020, 1, 1)

def test_card_content_and_assignment_are_mutable():
    card = Card(content="x")
    card.content = "y"
    card.document_id = "doc-1"
    assert card.content == "y"
    assert card.is_assigned

def test_card_accepts_persisted_field_names():
    card = Card.model_validate({
        "id": "9c4b2f7e-1d3a-4e5f-8a6b-7c8d9e0f1a2b",
        "content": "hello",
        "creationDate": "2026-10-19T08:30:15.123456",
        "documentID": "5B0C8F1E-3A1D-4C2E-9F4A-8D7E6C5B4A39",
    })
    assert card.creation_date == datetime(2026, 10, 19, 8, 30, 15, 123456)
    # Ids are validated, not normalized
    assert card.document_id == "5B0C8F1E-3A1D-4C2E-9F4A-8D7E6C5B4A39"

@pytest.mark.parametrize("field, value", [
    ("id", "c1"),
    ("id", ""),
    ("documentID", "not-a-uuid"),
])
def test_card_rejects_non_uuid_ids(field, value):
    data = {"content": "hello", field: value}
    with pytest.raises(ValidationError):
        Card.model_validate(data)

def test_document_rejects_non_uuid_id():
    with pytest.raises(ValidationError):
        Document(id="d1", name="Ideas")

def test_document_defaults():
    doc = Document(name="Ideas")
    assert doc.content == ""
    assert doc.is_task_document is False
    assert doc.id

def test_task_flag_is_frozen():
    doc = Document(name="Ideas")
    with pytest.raises(ValidationError):
        doc.is_task_document = True

def test_default_task_document():
    doc = Document.default_task_document()
    assert doc.name == "Tasks"
    assert doc.content == ""
    assert doc.is_task_document is True

def test_document_equality_is_by_id_only():
    doc = Document(name="A")
    assert doc == doc.model_copy(update={"name": "B", "content": "text"})
    assert doc != Document(name="A")

def test_document_dump_uses_persisted_aliases():
    data = Document(name="A").model_dump(by_alias=True)
    assert set(data) == {"id", "name", "content", "isTaskDocument", "creationDate"}

def test_snapshot_helpers():
    tasks = Document.default_task_document()
    other = Document(name="Ideas")
    free = Card(content="free")
    bound = Card(content="bound", document_id=other.id)

    snap = StoreSnapshot(cards=[free, bound], documents=[other, tasks])

    assert snap.unassigned_cards == [free]
    assert snap.task_document == tasks
    assert StoreSnapshot().task_document is None
