"""Dependency constraints (global and per-scope overrides, merged per scope)."""

from .build import construct_constraints, split_ranks
from .schema import Constraint, ConstraintDraft

__all__ = ["Constraint", "ConstraintDraft", "construct_constraints", "split_ranks"]
