"""Relation vocabulary: the closed set of stated relations and their labels."""

from enum import Enum


class RelationKind(str, Enum):
    """Relation an author declares towards the reference person."""

    SPOUSE = "spouse"
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"
    GRANDPARENT = "grandparent"
    GRANDCHILD = "grandchild"
    UNCLE_AUNT = "uncle_aunt"
    NEPHEW_NIECE = "nephew_niece"
    COUSIN = "cousin"
    IN_LAW = "in_law"
    FRIEND = "friend"
    COLLEAGUE = "colleague"
    NEIGHBOR = "neighbor"
    OTHER = "other"


RELATION_LABELS: dict[RelationKind, str] = {
    RelationKind.SPOUSE: "Spouse",
    RelationKind.CHILD: "Child",
    RelationKind.PARENT: "Parent",
    RelationKind.SIBLING: "Sibling",
    RelationKind.GRANDPARENT: "Grandparent",
    RelationKind.GRANDCHILD: "Grandchild",
    RelationKind.UNCLE_AUNT: "Uncle/Aunt",
    RelationKind.NEPHEW_NIECE: "Nephew/Niece",
    RelationKind.COUSIN: "Cousin",
    RelationKind.IN_LAW: "In-law",
    RelationKind.FRIEND: "Friend",
    RelationKind.COLLEAGUE: "Colleague",
    RelationKind.NEIGHBOR: "Neighbor",
    RelationKind.OTHER: "Other",
}


def label_for(kind: RelationKind) -> str:
    """Return the display label of a relation kind."""
    return RELATION_LABELS[kind]


def normalize_legacy(raw: str | None) -> RelationKind | None:
    """Map a loosely typed relation string onto the closed set.

    Args:
        raw: Relation as stored on a legacy guestbook entry

    Returns:
        The matching RelationKind, or None when the input is missing or unknown.
        Callers pick their own fallback.
    """
    if not raw:
        return None

    try:
        return RelationKind(raw.lower())
    except ValueError:
        return None
