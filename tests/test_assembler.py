"""Tests for assembling the kinship mesh graph."""

from typing import Callable

import pytest

from kinmesh.domain.mesh import DeducedRelationship, confidence_band
from kinmesh.domain.people import Person, ReferencePerson
from kinmesh.domain.relations import RelationKind
from kinmesh.kinship import MeshAssembler, build_mesh

PersonFactory = Callable[..., Person]


@pytest.fixture
def family(make_person: PersonFactory) -> list[Person]:
    return [
        make_person("Marie", "Dupont", RelationKind.CHILD, person_id="marie"),
        make_person("Luc", "Dupont", RelationKind.CHILD, person_id="luc"),
        make_person("Ana", "Martin", RelationKind.FRIEND, person_id="ana"),
    ]


def test_nodes_match_entities(family: list[Person], jean: ReferencePerson) -> None:
    mesh = MeshAssembler().assemble(jean, family)

    assert [node.id for node in mesh.nodes] == ["mem-1", "marie", "luc", "ana"]
    assert mesh.nodes[0].kind == "reference"
    assert mesh.nodes[0].name == "Jean Dupont"
    assert all(node.kind == "author" for node in mesh.nodes[1:])
    assert mesh.nodes[1].relation == RelationKind.CHILD
    assert mesh.nodes[1].surname == "Dupont"


def test_direct_edges_carry_stated_relation(family: list[Person], jean: ReferencePerson) -> None:
    mesh = MeshAssembler().assemble(jean, family)

    direct = [edge for edge in mesh.edges if not edge.deduced]
    assert [(e.source, e.target, e.label) for e in direct] == [
        ("mem-1", "marie", "Child"),
        ("mem-1", "luc", "Child"),
        ("mem-1", "ana", "Friend"),
    ]
    assert all(edge.line_style == "solid" and edge.confidence is None for edge in direct)


def test_deduced_edges_carry_confidence(family: list[Person], jean: ReferencePerson) -> None:
    mesh = MeshAssembler().assemble(jean, family)

    deduced = [edge for edge in mesh.edges if edge.deduced]
    assert len(deduced) == 1
    assert deduced[0].source == "marie"
    assert deduced[0].target == "luc"
    assert deduced[0].label == "Sibling"
    assert deduced[0].confidence == 0.95
    assert deduced[0].line_style == "dashed"


def test_surname_groups_are_included(family: list[Person], jean: ReferencePerson) -> None:
    mesh = MeshAssembler().assemble(jean, family)

    assert list(mesh.surname_groups) == ["DUPONT"]
    assert [p.id for p in mesh.surname_groups["DUPONT"]] == ["marie", "luc"]


def test_uses_given_relationships(family: list[Person], jean: ReferencePerson) -> None:
    mesh = MeshAssembler().assemble(jean, family, relationships=[])

    assert mesh.relationships == []
    assert not any(edge.deduced for edge in mesh.edges)


def test_relationship_for_edge_matches_either_order(
    family: list[Person], jean: ReferencePerson
) -> None:
    relationships = build_mesh(family, jean)
    mesh = MeshAssembler().assemble(jean, family, relationships=relationships)

    assert mesh.relationship_for_edge("marie", "luc") == relationships[0]
    assert mesh.relationship_for_edge("luc", "marie") == relationships[0]
    assert mesh.relationship_for_edge("marie", "ana") is None


def test_relationships_involving(family: list[Person], jean: ReferencePerson) -> None:
    mesh = MeshAssembler().assemble(jean, family)

    assert len(mesh.relationships_involving("luc")) == 1
    assert mesh.relationships_involving("ana") == []


def test_mesh_serializes_confidence_band(family: list[Person], jean: ReferencePerson) -> None:
    data = MeshAssembler().assemble(jean, family).model_dump(mode="json")

    assert data["relationships"][0]["band"] == "high"
    assert data["nodes"][1]["relation"] == "child"


@pytest.mark.parametrize(
    ("confidence", "band"),
    [(0.95, "high"), (0.9, "high"), (0.85, "medium"), (0.75, "medium"), (0.6, "low")],
)
def test_confidence_band(confidence: float, band: str) -> None:
    assert confidence_band(confidence) == band


def test_confidence_must_be_positive(family: list[Person]) -> None:
    with pytest.raises(ValueError):
        DeducedRelationship(
            person_a=family[0],
            person_b=family[1],
            relation="sibling",
            label="Sibling",
            explanation="",
            confidence=0.0,
        )
