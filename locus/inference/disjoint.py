"""
Disjointness proofs: show that "X is located in Y" is false.

Walk the containment graph upward from X. If some container on the way
shares a mutually-disjoint type with Y, then X sits inside something Y
cannot be, and the goal is refuted.

Example:
    isA kitchen Room, isA garden Room, mutuallyDisjoint Room Room
    locatedIn apple basket, locatedIn basket kitchen
    => locatedIn apple garden is FALSE  (kitchen and garden are both Rooms)

The search is depth-first in the order the transitive-closure service
reports containers. The first disjoint container found wins; that is not
necessarily the nearest one.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..core.state import FactStore, coerce_fact, extract_operator_name, extract_arg_name
from ..core.proof import ProofResult, ProofStep, chain_step, no_match
from ..core.transitive import TransitiveClosure


CONTAINMENT = "locatedIn"
TYPE_OF = "isA"
DISJOINT_MARK = "mutuallyDisjoint"

DISJOINT_CONFIDENCE = 0.95


@dataclass
class ChainSearch:
    """Outcome of one containment walk."""
    found: bool
    container: Optional[str] = None
    steps: list = field(default_factory=list)


class DisjointProver:
    """
    Refutes locatedIn goals via containment chain + type disjointness.

    Holds no state between calls. Every walk starts with a fresh visited set.

    Args:
        store:        the fact store (read only)
        transitive:   transitive-closure service; default walks store edges
        max_visited:  safety valve on nodes visited per walk. None = unbounded.
        verbose:      print progress
    """

    def __init__(
        self,
        store: FactStore,
        transitive: Optional[TransitiveClosure] = None,
        max_visited: Optional[int] = None,
        verbose: bool = False,
    ):
        self.store = store
        self.transitive = transitive if transitive is not None else TransitiveClosure(store)
        self.max_visited = max_visited
        self.verbose = verbose

    def prove_not_located_in(self, goal, depth: int = 0) -> ProofResult:
        """
        Try to prove goal "locatedIn A B" false.

        depth is the caller's bookkeeping and does not bound the walk.
        Returns a valid result with result=False on success, no_match()
        for anything else (wrong operator, wrong arity, unresolved args,
        no disjoint container).
        """
        if extract_operator_name(goal) != CONTAINMENT:
            return no_match()
        args = getattr(goal, "args", None)
        if not args or len(args) != 2:
            return no_match()
        subject = extract_arg_name(args[0])
        target = extract_arg_name(args[1])
        if not subject or not target:
            return no_match()

        search = self.find_containment_chain_until_disjoint(subject, target)
        if not search.found:
            if self.verbose:
                print(f"  [no proof] no container of {subject} is disjoint from {target}")
            return no_match()

        return ProofResult(
            valid=True,
            result=False,
            method="disjoint_proof",
            confidence=DISJOINT_CONFIDENCE,
            goal=str(goal),
            steps=search.steps + [ProofStep("disjoint_check", search.container, target)],
        )

    def find_containment_chain_until_disjoint(self, subject: str, target: str) -> ChainSearch:
        """
        Depth-first walk from subject, stopping at the first node disjoint
        from target. Every edge followed becomes a chain_step, including
        edges into nodes already visited (those are not expanded again).
        """
        steps = []
        visited = {subject}
        if self._disjoint_here(subject, target):
            return ChainSearch(True, subject, steps)

        stack = [(subject, iter(self._containers(subject)))]
        while stack:
            name, containers = stack[-1]
            container = next(containers, None)
            if container is None:
                stack.pop()
                continue

            steps.append(chain_step(name, container, CONTAINMENT))
            if self.verbose:
                print(f"  [chain] {CONTAINMENT} {name} {container}")
            if container in visited:
                continue
            if self._over_budget(visited):
                break
            visited.add(container)

            if self._disjoint_here(container, target):
                return ChainSearch(True, container, steps)
            stack.append((container, iter(self._containers(container))))

        return ChainSearch(False, None, steps)

    def find_containment_chain_with_steps(self, entity: str):
        """
        Every container reachable from entity, with no disjointness cutoff.

        Returns (chain, steps). chain lists a container once per edge
        followed, in depth-first order; nodes are expanded at most once.
        """
        chain = []
        steps = []
        visited = {entity}
        stack = [(entity, iter(self._containers(entity)))]
        while stack:
            name, containers = stack[-1]
            container = next(containers, None)
            if container is None:
                stack.pop()
                continue
            chain.append(container)
            steps.append(chain_step(name, container, CONTAINMENT))
            if container in visited:
                continue
            if self._over_budget(visited):
                break
            visited.add(container)
            stack.append((container, iter(self._containers(container))))
        return chain, steps

    def find_containment_chain(self, entity: str) -> list:
        chain, _ = self.find_containment_chain_with_steps(entity)
        return chain

    def check_disjoint(self, a: str, b: str) -> bool:
        """True iff a and b share a declared type that is mutually disjoint."""
        if a == b:
            return False
        types_b = set(self.find_types(b))
        for type_a in self.find_types(a):
            if type_a in types_b and self.is_mutually_disjoint(type_a):
                return True
        return False

    def find_types(self, entity: str) -> list:
        types = []
        for fact in map(coerce_fact, self.store.find_by_arg0(entity)):
            if fact.operator == TYPE_OF and fact.arg(0) == entity and fact.arg(1):
                types.append(fact.arg(1))
        return types

    def is_mutually_disjoint(self, type_name: str) -> bool:
        for fact in map(coerce_fact, self.store.find_by_arg0(type_name)):
            if fact.operator == DISJOINT_MARK and fact.arg(0) == type_name:
                return True
        return False

    def _containers(self, name: str) -> list:
        return self.transitive.find_intermediates(CONTAINMENT, name)

    def _disjoint_here(self, name: str, target: str) -> bool:
        if self.verbose:
            print(f"  [visit] {name}")
        if self.check_disjoint(name, target):
            if self.verbose:
                print(f"  [disjoint] {name} cannot share a location with {target}")
            return True
        return False

    def _over_budget(self, visited: set) -> bool:
        if self.max_visited is None or len(visited) < self.max_visited:
            return False
        if self.verbose:
            print(f"  [safety valve] max_visited={self.max_visited} reached")
        return True
