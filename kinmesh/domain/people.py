"""People domain models: authors, the reference person and the raw records they come from."""

from pydantic import BaseModel, ConfigDict

from kinmesh.domain.relations import RelationKind, normalize_legacy


class Person(BaseModel):
    """An author who declared a single relation to the reference person.

    Attributes:
        id: Unique identifier (guestbook entry id)
        first_name: Author first name
        last_name: Author last name, possibly empty
        relation: Stated relation to the reference person
        reference_id: Identifier of the reference person
        message: Guestbook message text
        timestamp: Creation time of the guestbook entry, as stored
    """

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str
    relation: RelationKind
    reference_id: str
    message: str | None = None
    timestamp: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ReferencePerson(BaseModel):
    """The person every author is related to (the deceased)."""

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Memorial(BaseModel):
    """A memorial page for a deceased person."""

    id: str
    deceased_full_name: str
    is_published: bool = True


class GuestbookEntry(BaseModel):
    """A raw guestbook message left on a memorial."""

    id: str | None = None
    memorial_id: str
    author_name: str
    author_first_name: str | None = None
    author_last_name: str | None = None
    relationship: str | None = None  # legacy free-form relation
    message_text: str = ""
    created_at: str | None = None
    is_hidden: bool = False


def person_from_entry(
    entry: GuestbookEntry,
    index: int,
    default_relation: RelationKind = RelationKind.FRIEND,
) -> Person:
    """Normalize a guestbook entry into a Person.

    Args:
        entry: Raw guestbook entry
        index: Position of the entry in its memorial, used when the entry has no id
        default_relation: Relation used when the stored one cannot be normalized

    Returns:
        Person built from the entry
    """
    name_parts = entry.author_name.split()
    first_name = entry.author_first_name or (name_parts[0] if name_parts else "")
    last_name = entry.author_last_name or " ".join(name_parts[1:])

    return Person(
        id=entry.id or f"{entry.memorial_id}-{index}",
        first_name=first_name,
        last_name=last_name,
        relation=normalize_legacy(entry.relationship) or default_relation,
        reference_id=entry.memorial_id,
        message=entry.message_text or None,
        timestamp=entry.created_at,
    )


def reference_from_memorial(memorial: Memorial) -> ReferencePerson:
    """Split a memorial's full name into a ReferencePerson.

    A single-word name is used as both first and last name.
    """
    name_parts = memorial.deceased_full_name.split()
    first_name = name_parts[0] if name_parts else ""
    last_name = " ".join(name_parts[1:]) or memorial.deceased_full_name

    return ReferencePerson(id=memorial.id, first_name=first_name, last_name=last_name)
