"""Pairwise deduction of relationships between two authors of the same reference person."""

from dataclasses import dataclass
from typing import Callable

from kinmesh.domain.mesh import DeducedRelationship
from kinmesh.domain.people import Person, ReferencePerson
from kinmesh.domain.relations import RelationKind

Explain = Callable[[Person, Person, ReferencePerson], str]


@dataclass(frozen=True)
class DeductionRule:
    """One row of the decision table.

    Attributes:
        name: Short rule name, for logs and tests
        matches: Predicate on the ordered (a, b) pair
        relation: Deduced relation tag
        label: Display label of the deduced relation
        confidence: Fixed confidence of the rule
        explain: Builds the explanation text
    """

    name: str
    matches: Callable[[Person, Person], bool]
    relation: str
    label: str
    confidence: float
    explain: Explain

    def apply(self, a: Person, b: Person, reference: ReferencePerson) -> DeducedRelationship:
        return DeducedRelationship(
            person_a=a,
            person_b=b,
            relation=self.relation,
            label=self.label,
            explanation=self.explain(a, b, reference),
            confidence=self.confidence,
        )


def _stated(rel_a: RelationKind, rel_b: RelationKind) -> Callable[[Person, Person], bool]:
    """Predicate matching the ordered pair of stated relations."""

    def matches(a: Person, b: Person) -> bool:
        return a.relation == rel_a and b.relation == rel_b

    return matches


def _both_stated(*kinds: RelationKind) -> Callable[[Person, Person], bool]:
    """Predicate matching when both authors declared the same relation, one of kinds."""

    def matches(a: Person, b: Person) -> bool:
        return a.relation == b.relation and a.relation in kinds

    return matches


def _same_surname(a: Person, b: Person) -> bool:
    # Raw comparison; surname grouping normalizes separately.
    return a.last_name != "" and a.last_name == b.last_name


# Order is precedence: the surname fallback must stay last.
RULES: tuple[DeductionRule, ...] = (
    DeductionRule(
        name="children",
        matches=_stated(RelationKind.CHILD, RelationKind.CHILD),
        relation="sibling",
        label="Sibling",
        confidence=0.95,
        explain=lambda a, b, ref: (
            f"{a.first_name} and {b.first_name} are both children of {ref.first_name}, "
            "therefore likely siblings"
        ),
    ),
    DeductionRule(
        name="spouse_then_child",
        matches=_stated(RelationKind.SPOUSE, RelationKind.CHILD),
        relation="parent_child",
        label="Parent/Child",
        confidence=0.90,
        explain=lambda a, b, ref: (
            f"{a.first_name} is the spouse of {ref.first_name} and {b.first_name} is the child "
            f"of {ref.first_name}, therefore likely parent and child"
        ),
    ),
    DeductionRule(
        name="child_then_spouse",
        matches=_stated(RelationKind.CHILD, RelationKind.SPOUSE),
        relation="parent_child",
        label="Parent/Child",
        confidence=0.90,
        explain=lambda a, b, ref: (
            f"{b.first_name} is the spouse of {ref.first_name} and {a.first_name} is the child "
            f"of {ref.first_name}, therefore likely parent and child"
        ),
    ),
    DeductionRule(
        name="parents",
        matches=_stated(RelationKind.PARENT, RelationKind.PARENT),
        relation="spouse",
        label="Spouse",
        confidence=0.85,
        explain=lambda a, b, ref: (
            f"{a.first_name} and {b.first_name} are both parents of {ref.first_name}, "
            "therefore likely spouses"
        ),
    ),
    DeductionRule(
        name="siblings",
        matches=_stated(RelationKind.SIBLING, RelationKind.SIBLING),
        # Data cannot tell siblings from siblings-in-law; keep both.
        relation="in_law_or_sibling",
        label="Sibling or sibling-in-law",
        confidence=0.80,
        explain=lambda a, b, ref: (
            f"{a.first_name} and {b.first_name} are both siblings of {ref.first_name}"
        ),
    ),
    DeductionRule(
        name="same_generation",
        matches=_both_stated(RelationKind.GRANDCHILD, RelationKind.GRANDPARENT),
        relation="family",
        label="Family",
        confidence=0.70,
        explain=lambda a, b, ref: (
            f"{a.first_name} and {b.first_name} share a family relationship "
            f"through {ref.first_name}"
        ),
    ),
    DeductionRule(
        name="same_surname",
        matches=_same_surname,
        relation="potential_family",
        label="Potential family",
        confidence=0.60,
        explain=lambda a, b, ref: (
            f"{a.first_name} and {b.first_name} share the same last name ({a.last_name})"
        ),
    ),
)


def deduce(
    a: Person,
    b: Person,
    reference: ReferencePerson,
    rules: tuple[DeductionRule, ...] = RULES,
) -> DeducedRelationship | None:
    """Deduce the relationship between two authors of the same reference person.

    Rules are evaluated in order and the first match wins.

    Args:
        a: First author, in enumeration order
        b: Second author, distinct from a
        reference: Reference person both authors declared a relation to
        rules: Decision table to evaluate

    Returns:
        The deduced relationship, or None when no rule matches
    """
    for rule in rules:
        if rule.matches(a, b):
            return rule.apply(a, b, reference)
    return None
