"""
Strategy dispatch: try provers in order, return the first that answers.

This is the thin layer that wires the provers together. Each strategy is
a function strategy(store, goal, depth, verbose) -> ProofResult, and a
non-match just means "next one". Property queries look facts up directly
first and only fall back to type induction when that yields nothing.
"""

from typing import Callable, Optional, Sequence

from .core.state import (
    FactStore, Goal, Hole, coerce_fact, coerce_hole, extract_operator_name, extract_arg_name,
)
from .core.proof import ProofResult, ProofStep, no_match
from .core.transitive import TransitiveClosure
from .inference.disjoint import DisjointProver
from .inference.induction import PROPERTY, induce_unary_property


def prove_direct(store: FactStore, goal: Goal, depth: int = 0, verbose: bool = False) -> ProofResult:
    """The goal is literally a stored fact."""
    operator = extract_operator_name(goal)
    names = [extract_arg_name(a) for a in getattr(goal, "args", ())]
    if operator is None or not names or not all(names):
        return no_match()
    if not store.holds(operator, *names):
        return no_match()
    fact = " ".join([operator] + names)
    if verbose:
        print(f"  [direct] {fact}")
    return ProofResult(
        valid=True,
        result=True,
        method="direct",
        confidence=1.0,
        goal=str(goal),
        steps=[ProofStep("direct_match", fact=fact)],
    )


def prove_transitive(store: FactStore, goal: Goal, depth: int = 0, verbose: bool = False) -> ProofResult:
    result = TransitiveClosure(store).prove_chain(goal, depth)
    if verbose and result.valid:
        print(f"  [transitive] {result.goal} via {len(result.steps)} hop(s)")
    return result


def prove_disjoint(store: FactStore, goal: Goal, depth: int = 0, verbose: bool = False) -> ProofResult:
    return DisjointProver(store, verbose=verbose).prove_not_located_in(goal, depth)


DEFAULT_STRATEGIES = (prove_direct, prove_transitive, prove_disjoint)


def prove_goal(
    store: FactStore,
    goal: Goal,
    strategies: Sequence[Callable] = DEFAULT_STRATEGIES,
    depth: int = 0,
    verbose: bool = False,
) -> ProofResult:
    """
    Run each strategy in turn until one returns a valid result.

    Args:
        store:       fact store
        goal:        the goal to prove or refute
        strategies:  strategy(store, goal, depth, verbose) -> ProofResult
        depth:       passed through to each strategy
        verbose:     print progress
    """
    for strategy in strategies:
        if verbose:
            print(f"  [try] {strategy.__name__} on {goal}")
        result = strategy(store, goal, depth, verbose)
        if result.valid:
            return result
    return no_match()


def query_property(
    store: FactStore,
    entity: str,
    hole: Optional[Hole] = None,
    min_support=1,
    verbose: bool = False,
) -> list:
    """
    Answer hasProperty(entity, ?hole).

    Direct facts come back as plain dict candidates with score 1.0.
    Only when there are none does type induction get a turn.
    """
    hole = coerce_hole(hole) if hole is not None else Hole("x")
    direct = []
    for fact in map(coerce_fact, store.find_by_arg0(entity)):
        if fact.operator != PROPERTY or not fact.arg(1):
            continue
        direct.append({
            "bindings": {hole.name: {"answer": fact.arg(1), "similarity": 1.0,
                                     "method": "direct", "steps": [fact.name]}},
            "score": 1.0,
            "factName": fact.name,
            "method": "direct",
            "steps": [fact.name],
        })
    if direct:
        if verbose:
            print(f"  [direct] {len(direct)} stored value(s) for {entity}")
        return direct

    if verbose:
        print(f"  [fallback] no stored {PROPERTY} for {entity}, trying type induction")
    return [r.to_dict() for r in induce_unary_property(store, entity, hole, min_support, verbose)]
