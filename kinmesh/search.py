"""Kinship search across memorials: by deceased name and by author name."""

import logging
from typing import Literal

from pydantic import BaseModel

from kinmesh.domain.mesh import DeducedRelationship, KinshipMesh
from kinmesh.domain.people import Memorial, Person, person_from_entry, reference_from_memorial
from kinmesh.domain.relations import RelationKind
from kinmesh.kinship import MeshAssembler
from kinmesh.memorial_store.base import MemorialStore

logger = logging.getLogger(__name__)


class KinshipSearchResult(BaseModel):
    """A memorial matched by a search, with its kinship mesh.

    Attributes:
        kind: "deceased" when the deceased name matched, "author" when an author name matched
        memorial: The matched memorial
        mesh: Kinship mesh of the memorial
        searched_author: Author matching the query, for author results
        related: Deduced relationships involving the searched author
    """

    kind: Literal["deceased", "author"]
    memorial: Memorial
    mesh: KinshipMesh
    searched_author: Person | None = None
    related: list[DeducedRelationship] = []


class KinshipSearchService:
    """Loads authors from a memorial store and runs the kinship engine over them."""

    def __init__(
        self,
        store: MemorialStore,
        *,
        default_relation: RelationKind = RelationKind.FRIEND,
        limit: int = 10,
    ) -> None:
        self.store = store
        self.default_relation = default_relation
        self.limit = limit
        self.assembler = MeshAssembler()

    def authors_for(self, memorial_id: str) -> list[Person]:
        """Normalize the visible guestbook entries of a memorial into authors."""
        return [
            person_from_entry(entry, index, self.default_relation)
            for index, entry in enumerate(self.store.get_entries(memorial_id))
        ]

    def mesh_for(self, memorial_id: str) -> KinshipMesh:
        """Build the kinship mesh of a memorial.

        Raises:
            KeyError: If the memorial does not exist
        """
        memorial = self.store.get_memorial(memorial_id)
        return self._mesh(memorial, self.authors_for(memorial_id))

    def search(self, query: str) -> list[KinshipSearchResult]:
        """Search memorials by deceased name, then by author name.

        Args:
            query: Free-text name fragment

        Returns:
            Deceased results first, then at most one author result per memorial
        """
        query = query.strip()
        if not query:
            return []

        results = self._search_by_deceased(query) + self._search_by_author(query)
        logger.info(f"Search '{query}' returned {len(results)} results")
        return results

    def _mesh(self, memorial: Memorial, authors: list[Person]) -> KinshipMesh:
        return self.assembler.assemble(reference_from_memorial(memorial), authors)

    def _search_by_deceased(self, query: str) -> list[KinshipSearchResult]:
        results = []
        for memorial in self.store.search_memorials(query, limit=self.limit):
            mesh = self._mesh(memorial, self.authors_for(memorial.id))
            results.append(KinshipSearchResult(kind="deceased", memorial=memorial, mesh=mesh))
        return results

    def _search_by_author(self, query: str) -> list[KinshipSearchResult]:
        results = []
        processed_memorials: set[str] = set()

        for entry in self.store.search_entries_by_author(query):
            if entry.memorial_id in processed_memorials:
                continue
            processed_memorials.add(entry.memorial_id)

            try:
                memorial = self.store.get_memorial(entry.memorial_id)
            except KeyError:
                logger.warning(f"Skipping entry of unknown memorial {entry.memorial_id}")
                continue

            authors = self.authors_for(memorial.id)
            mesh = self._mesh(memorial, authors)
            searched_author = self._find_author(authors, query)
            related = mesh.relationships_involving(searched_author.id) if searched_author else []

            results.append(
                KinshipSearchResult(
                    kind="author",
                    memorial=memorial,
                    mesh=mesh,
                    searched_author=searched_author,
                    related=related,
                )
            )

        return results

    @staticmethod
    def _find_author(authors: list[Person], query: str) -> Person | None:
        """First author whose first or last name contains the query."""
        query_lower = query.lower()
        for author in authors:
            if query_lower in author.first_name.lower() or query_lower in author.last_name.lower():
                return author
        return None
