from .state import (
    Fact, FactStore, Goal, Hole, MalformedFactError,
    coerce_fact, coerce_hole, extract_operator_name, extract_arg_name,
)
from .proof import ProofStep, ProofResult, chain_step, no_match, print_proof
from .transitive import TransitiveClosure, TRANSITIVE_RELATIONS, RESERVED_WORDS

__all__ = [
    "Fact", "FactStore", "Goal", "Hole", "MalformedFactError",
    "coerce_fact", "coerce_hole", "extract_operator_name", "extract_arg_name",
    "ProofStep", "ProofResult", "chain_step", "no_match", "print_proof",
    "TransitiveClosure", "TRANSITIVE_RELATIONS", "RESERVED_WORDS",
]
