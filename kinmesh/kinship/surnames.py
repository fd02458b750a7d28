"""Grouping authors by surname."""

from typing import Iterable

from kinmesh.domain.people import Person


def normalize_surname(last_name: str) -> str:
    return last_name.strip().upper()


def group_by_surname(authors: Iterable[Person]) -> dict[str, list[Person]]:
    """Group authors sharing a normalized surname.

    Args:
        authors: Authors to group

    Returns:
        Dictionary mapping normalized surname to its authors, in input order.
        Blank surnames and single-member groups are left out.
    """
    surname_groups: dict[str, list[Person]] = {}

    for author in authors:
        surname = normalize_surname(author.last_name)
        if not surname:
            continue
        if surname not in surname_groups:
            surname_groups[surname] = []
        surname_groups[surname].append(author)

    return {surname: group for surname, group in surname_groups.items() if len(group) > 1}
