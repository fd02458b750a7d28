from typing import Callable

import pytest
from fastapi.testclient import TestClient

from kinmesh.api import create_app
from kinmesh.domain.people import GuestbookEntry, Memorial, Person, ReferencePerson
from kinmesh.domain.relations import RelationKind
from kinmesh.memorial_store.base import MemorialStore
from tests.fakes import FakeMemorialStore

PersonFactory = Callable[..., Person]


@pytest.fixture
def jean() -> ReferencePerson:
    return ReferencePerson(id="mem-1", first_name="Jean", last_name="Dupont")


@pytest.fixture
def make_person(jean: ReferencePerson) -> PersonFactory:
    """Build authors of Jean with sequential ids."""
    counter = iter(range(1, 1000))

    def _make(
        first_name: str, last_name: str, relation: RelationKind, person_id: str | None = None
    ) -> Person:
        return Person(
            id=person_id or f"author-{next(counter)}",
            first_name=first_name,
            last_name=last_name,
            relation=relation,
            reference_id=jean.id,
        )

    return _make


@pytest.fixture
def test_memorials() -> dict[str, Memorial]:
    return {
        "mem-1": Memorial(id="mem-1", deceased_full_name="Jean Dupont"),
        "mem-2": Memorial(id="mem-2", deceased_full_name="Rose Martin", is_published=False),
        "mem-3": Memorial(id="mem-3", deceased_full_name="Jeanne Leroy"),
    }


@pytest.fixture
def test_entries() -> list[GuestbookEntry]:
    return [
        GuestbookEntry(
            id="e1", memorial_id="mem-1", author_name="Marie Dupont", relationship="child"
        ),
        GuestbookEntry(
            id="e2", memorial_id="mem-1", author_name="Luc Dupont", relationship="CHILD"
        ),
        GuestbookEntry(
            id="e3", memorial_id="mem-1", author_name="Claire Dupont", relationship="spouse"
        ),
        GuestbookEntry(
            id="e4",
            memorial_id="mem-1",
            author_name="Ana Martin",
            relationship="best friend",
            message_text="Rest in peace",
        ),
        GuestbookEntry(
            id="e5",
            memorial_id="mem-1",
            author_name="Paul Dupont",
            relationship="child",
            is_hidden=True,
        ),
        GuestbookEntry(
            id="e6", memorial_id="mem-2", author_name="Ana Martin", relationship="friend"
        ),
        GuestbookEntry(
            id="e7", memorial_id="mem-3", author_name="Hugo Leroy", relationship="grandchild"
        ),
        GuestbookEntry(
            id="e8", memorial_id="mem-3", author_name="Ines Leroy", relationship="grandchild"
        ),
    ]


@pytest.fixture
def fake_store(
    test_memorials: dict[str, Memorial], test_entries: list[GuestbookEntry]
) -> MemorialStore:
    return FakeMemorialStore(test_memorials, test_entries)


@pytest.fixture
def test_client(fake_store: MemorialStore) -> TestClient:
    """Create test client with a fake memorial store."""
    app = create_app(store=fake_store)
    return TestClient(app)
