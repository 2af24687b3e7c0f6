import pytest

from app.core.exceptions import DuplicateCredentialError
from app.models.visitor import Visitor
from app.repositories.visitor_store import SqlAlchemyVisitorStore


@pytest.fixture
def store(db_session):
    return SqlAlchemyVisitorStore(db_session)


def _visitor(name, qr_token, otp):
    return Visitor(name=name, phone="555-0100", qr_token=qr_token, otp=otp, arrived=False)


def test_insert_assigns_id_and_defaults(store):
    visitor = store.insert(_visitor("Alice", "QR1", "1234"))

    assert visitor.id is not None
    assert visitor.created_at is not None
    assert store.get(visitor.id).name == "Alice"


def test_find_by_field_and_substring(store):
    alice = store.insert(_visitor("Alice", "QR1", "1234"))
    khalil = store.insert(_visitor("KHALIL", "QR2", "5678"))

    assert store.find_by_field("qr_token", "QR2").id == khalil.id
    assert store.find_by_field("otp", "0000") is None
    assert [v.id for v in store.find_by_substring("name", "ali")] == [alice.id, khalil.id]


def test_list_all_in_id_order(store):
    for i, name in enumerate(["Zed", "Amy", "Kim"]):
        store.insert(_visitor(name, f"QR{i}", f"100{i}"))

    assert [v.name for v in store.list_all()] == ["Zed", "Amy", "Kim"]


def test_unsupported_field_rejected(store):
    with pytest.raises(ValueError):
        store.find_by_field("arrived", "true")


@pytest.mark.parametrize("qr_token, otp, field", [
    ("QR1", "9999", "qr_token"),
    ("QR9", "1234", "otp"),
])
def test_unique_constraint_raises_duplicate_credential(store, qr_token, otp, field):
    store.insert(_visitor("Alice", "QR1", "1234"))

    with pytest.raises(DuplicateCredentialError) as excinfo:
        store.insert(_visitor("Mallory", qr_token, otp))

    assert excinfo.value.field == field
    assert len(store.list_all()) == 1


def test_update_persists_arrival(store):
    visitor = store.insert(_visitor("Alice", "QR1", "1234"))
    visitor.arrived = True
    store.update(visitor)

    assert store.get(visitor.id).arrived is True


def test_get_out_of_range_id_returns_none(store):
    store.insert(_visitor("Alice", "QR1", "1234"))

    assert store.get(10**20) is None
    assert store.get(0) is None
    assert store.get(-5) is None


def test_insert_without_name(store):
    visitor = store.insert(Visitor(name=None, phone=None, qr_token="QR1", otp="1234", arrived=False))

    assert store.get(visitor.id).name is None
    assert store.find_by_substring("name", "a") == []
