from .disjoint import DisjointProver, ChainSearch
from .induction import Binding, InductionResult, induce_unary_property

__all__ = ["DisjointProver", "ChainSearch", "Binding", "InductionResult", "induce_unary_property"]
