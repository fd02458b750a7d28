"""Kinship deduction: pairwise rules, surname grouping and mesh assembly."""

from kinmesh.kinship.assembler import MeshAssembler
from kinmesh.kinship.deducer import RULES, DeductionRule, deduce
from kinmesh.kinship.mesh_builder import build_mesh
from kinmesh.kinship.surnames import group_by_surname, normalize_surname

__all__ = [
    "RULES",
    "DeductionRule",
    "MeshAssembler",
    "build_mesh",
    "deduce",
    "group_by_surname",
    "normalize_surname",
]
