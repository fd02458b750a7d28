"""Assembling a renderable node/edge graph from a reference person and their authors."""

from typing import Sequence

from kinmesh.domain.mesh import DeducedRelationship, KinshipMesh, MeshEdge, MeshNode
from kinmesh.domain.people import Person, ReferencePerson
from kinmesh.domain.relations import label_for

from .mesh_builder import build_mesh
from .surnames import group_by_surname


class MeshAssembler:
    """Builds kinship mesh graphs for rendering."""

    def assemble(
        self,
        reference: ReferencePerson,
        authors: Sequence[Person],
        relationships: list[DeducedRelationship] | None = None,
    ) -> KinshipMesh:
        """Build the kinship mesh graph.

        Args:
            reference: Reference person at the centre of the mesh
            authors: Authors related to the reference person
            relationships: Deduced relationships; built from the authors when omitted

        Returns:
            KinshipMesh with nodes, direct and deduced edges, and surname groups
        """
        if relationships is None:
            relationships = build_mesh(authors, reference)

        return KinshipMesh(
            nodes=self._build_nodes(reference, authors),
            edges=self._build_direct_edges(reference, authors)
            + self._build_deduced_edges(relationships),
            relationships=relationships,
            surname_groups=group_by_surname(authors),
        )

    def _build_nodes(self, reference: ReferencePerson, authors: Sequence[Person]) -> list[MeshNode]:
        nodes = [MeshNode(id=reference.id, name=reference.full_name, kind="reference")]
        for author in authors:
            nodes.append(
                MeshNode(
                    id=author.id,
                    name=author.full_name,
                    kind="author",
                    relation=author.relation,
                    surname=author.last_name,
                )
            )
        return nodes

    def _build_direct_edges(
        self, reference: ReferencePerson, authors: Sequence[Person]
    ) -> list[MeshEdge]:
        """One solid edge per author, labelled with the stated relation."""
        return [
            MeshEdge(
                source=reference.id,
                target=author.id,
                label=label_for(author.relation),
            )
            for author in authors
        ]

    def _build_deduced_edges(self, relationships: list[DeducedRelationship]) -> list[MeshEdge]:
        """One dashed edge per deduced relationship, carrying its confidence."""
        return [
            MeshEdge(
                source=relationship.person_a.id,
                target=relationship.person_b.id,
                label=relationship.label,
                deduced=True,
                confidence=relationship.confidence,
                line_style="dashed",
            )
            for relationship in relationships
        ]
