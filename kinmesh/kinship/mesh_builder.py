"""Building the mesh of deduced relationships for a set of authors."""

import logging
from itertools import combinations
from typing import Sequence

from kinmesh.domain.mesh import DeducedRelationship
from kinmesh.domain.people import Person, ReferencePerson

from .deducer import deduce

logger = logging.getLogger(__name__)


def build_mesh(
    authors: Sequence[Person], reference: ReferencePerson
) -> list[DeducedRelationship]:
    """Deduce relationships for every unordered pair of authors.

    Pairs are enumerated as (i, j) with i < j in input order, and results keep that order.

    Args:
        authors: Authors of the reference person
        reference: Reference person

    Returns:
        Deduced relationships, one per pair where a rule matched
    """
    relationships = []

    for author_a, author_b in combinations(authors, 2):
        deduced = deduce(author_a, author_b, reference)
        if deduced is not None:
            relationships.append(deduced)

    logger.debug(
        f"Deduced {len(relationships)} relationships among {len(authors)} authors "
        f"of {reference.id}"
    )
    return relationships
