"""
Locus: disjointness proofs and type induction over ground facts.

Two narrow reasoners over a store of binary facts:

    DisjointProver      refutes "locatedIn A B" by climbing A's containment
                        chain until it meets something B cannot share a
                        type-exclusive place with.
    induce_unary_property
                        fills hasProperty(E, ?x) from the unanimous values
                        of E's type-peers, as a last-resort fallback.

Usage:
    python -m locus --domain rooms
    python -m locus --domain animals
    python -m locus --prove "locatedIn apple garden"
    python -m locus --domain animals --query lily --min-support 2
"""

from .core.state import Fact, FactStore, Goal, Hole, MalformedFactError, coerce_fact, coerce_hole
from .core.proof import ProofStep, ProofResult, no_match, print_proof
from .core.transitive import TransitiveClosure
from .inference.disjoint import DisjointProver, ChainSearch
from .inference.induction import Binding, InductionResult, induce_unary_property
from .engine import prove_goal, query_property

__all__ = [
    "Fact", "FactStore", "Goal", "Hole", "MalformedFactError", "coerce_fact", "coerce_hole",
    "ProofStep", "ProofResult", "no_match", "print_proof",
    "TransitiveClosure",
    "DisjointProver", "ChainSearch",
    "Binding", "InductionResult", "induce_unary_property",
    "prove_goal", "query_property",
]
