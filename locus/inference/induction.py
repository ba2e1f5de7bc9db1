"""
Type induction: guess a missing unary property from an entity's type-peers.

If E is a T, and every other T that reports a hasProperty value reports
the same one, propose that value for E too:

    isA swan1 Swan, isA swan2 Swan, isA swan3 Swan
    hasProperty swan2 white, hasProperty swan3 white
    => hasProperty swan1 white   [similarity 0.35]

Deliberately conservative. One dissenting peer vetoes the type, and the
first type that qualifies wins; later types are never consulted. Only
meant as a fallback when direct lookup found nothing.
"""

import math
import numbers
from decimal import Decimal
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from ..core.state import FactStore, coerce_fact, coerce_hole


TYPE_OF = "isA"
PROPERTY = "hasProperty"
METHOD = "type_induction"

# Two tiers, keyed on the effective min_support.
WEAK_SCORE = 0.35
SUPPORTED_SCORE = 0.55


@dataclass
class Binding:
    """The value proposed for one query variable, with its justification."""
    answer: str
    similarity: float
    method: str = METHOD
    steps: list = field(default_factory=list)

    def to_dict(self):
        return {"answer": self.answer, "similarity": self.similarity,
                "method": self.method, "steps": list(self.steps)}


@dataclass
class InductionResult:
    """One query candidate, shaped like a direct-lookup answer."""
    bindings: dict
    score: float
    fact_name: Optional[str] = None
    method: str = METHOD
    steps: list = field(default_factory=list)

    def to_dict(self):
        return {
            "bindings": {k: b.to_dict() for k, b in self.bindings.items()},
            "score": self.score,
            "factName": self.fact_name,
            "method": self.method,
            "steps": list(self.steps),
        }

    def __repr__(self):
        answers = ", ".join(f"{k}={b.answer}" for k, b in self.bindings.items())
        return f"InductionResult({answers} [score={self.score}])"


def effective_min_support(min_support) -> float:
    """Anything that is not a finite positive number falls back to 1."""
    if isinstance(min_support, bool) or not isinstance(min_support, (numbers.Real, Decimal)):
        return 1
    if not math.isfinite(min_support) or min_support <= 0:
        return 1
    return min_support


def direct_types(store: FactStore, entity: str) -> list:
    return [f.arg(1) for f in map(coerce_fact, store.find_by_arg0(entity))
            if f.operator == TYPE_OF and f.arg(1)]


def peers_of_type(store: FactStore, type_name: str, exclude: str) -> list:
    return [f.arg(0) for f in map(coerce_fact, store.find_by_arg1(type_name))
            if f.operator == TYPE_OF and f.arg(0) and f.arg(0) != exclude]


def property_values(store: FactStore, entity: str) -> list:
    return [f.arg(1) for f in map(coerce_fact, store.find_by_arg0(entity))
            if f.operator == PROPERTY and f.arg(1)]


def induce_unary_property(
    store: FactStore,
    entity: str,
    hole,
    min_support=1,
    verbose: bool = False,
) -> list:
    """
    Propose hasProperty(entity, ?hole) from unanimous type-peers.

    Args:
        store:        fact store with find_by_arg0 / find_by_arg1
        entity:       the entity whose property is unknown
        hole:         Hole, "?x" text, {"name": ...} or object with .name
        min_support:  minimum peers, contributing peers, and agreeing votes
        verbose:      print progress

    Returns:
        [InductionResult] for the first qualifying type, else [].
    """
    support = effective_min_support(min_support)
    key = coerce_hole(hole).name

    types = direct_types(store, entity)
    if not types:
        if verbose:
            print(f"  [skip] {entity} has no declared type")
        return []

    for type_name in types:
        peers = peers_of_type(store, type_name, entity)
        if len(peers) < support:
            if verbose:
                print(f"  [skip] {type_name}: {len(peers)} peers < {support}")
            continue

        votes = Counter()
        contributing = 0
        for peer in peers:
            values = property_values(store, peer)
            if not values:
                continue
            contributing += 1
            votes.update(values)

        if contributing < support:
            if verbose:
                print(f"  [skip] {type_name}: {contributing} contributing peers < {support}")
            continue
        if len(votes) != 1:
            if verbose:
                print(f"  [skip] {type_name}: peers disagree {dict(votes)}")
            continue

        (value, count), = votes.items()
        if count < support:
            continue

        score = WEAK_SCORE if support <= 1 else SUPPORTED_SCORE
        steps = [
            f"{TYPE_OF} {entity} {type_name}",
            f"induction: among {type_name} peers, observed {count}/{contributing} with {value}",
            f"therefore {PROPERTY} {entity} {value}",
        ]
        if verbose:
            print(f"  [induced] {PROPERTY} {entity} {value} from {type_name} ({count}/{contributing})")

        binding = Binding(answer=value, similarity=score, steps=steps)
        return [InductionResult(bindings={key: binding}, score=score, steps=list(steps))]

    return []
