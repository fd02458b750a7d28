"""Kinship mesh domain models."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field

from kinmesh.domain.people import Person
from kinmesh.domain.relations import RelationKind

ConfidenceBand = Literal["high", "medium", "low"]


def confidence_band(confidence: float) -> ConfidenceBand:
    """Bucket a confidence score for display."""
    if confidence >= 0.9:
        return "high"
    if confidence >= 0.75:
        return "medium"
    return "low"


class DeducedRelationship(BaseModel):
    """A secondary relationship between two authors inferred through the reference person."""

    person_a: Person
    person_b: Person
    relation: str  # free-form tag, e.g. "sibling" or "in_law_or_sibling"
    label: str
    explanation: str
    confidence: float = Field(gt=0.0, le=1.0)

    @computed_field
    @property
    def band(self) -> ConfidenceBand:
        return confidence_band(self.confidence)

    def involves(self, person_id: str) -> bool:
        return person_id in (self.person_a.id, self.person_b.id)

    def connects(self, source_id: str, target_id: str) -> bool:
        """Whether the relationship joins the two ids, in either order."""
        return {self.person_a.id, self.person_b.id} == {source_id, target_id}


class MeshNode(BaseModel):
    """A graph node: either the reference person or an author."""

    id: str
    name: str
    kind: Literal["reference", "author"]
    relation: RelationKind | None = None
    surname: str | None = None


class MeshEdge(BaseModel):
    """A graph edge: a stated relation (direct) or a deduced one."""

    source: str
    target: str
    label: str
    deduced: bool = False
    confidence: float | None = None
    line_style: Literal["solid", "dashed"] = "solid"


class KinshipMesh(BaseModel):
    """Node/edge graph of a reference person, their authors and the deduced relationships."""

    nodes: list[MeshNode] = []
    edges: list[MeshEdge] = []
    relationships: list[DeducedRelationship] = []
    surname_groups: dict[str, list[Person]] = {}

    def relationship_for_edge(self, source_id: str, target_id: str) -> DeducedRelationship | None:
        """Find the deduced relationship behind an edge, matching endpoints in either order."""
        for relationship in self.relationships:
            if relationship.connects(source_id, target_id):
                return relationship
        return None

    def relationships_involving(self, person_id: str) -> list[DeducedRelationship]:
        return [r for r in self.relationships if r.involves(person_id)]
