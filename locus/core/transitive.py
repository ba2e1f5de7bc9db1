"""
Transitive closure over a fact store.

Answers "what does this entity point to under relation R", one hop at a
time (find_intermediates) or all the way out (find_all_targets), and can
prove a positive chain R(a, ..., b).

Hop order is the store's insertion order, so every walk is reproducible.
"""

from typing import Optional

from .state import FactStore, Goal, coerce_fact, extract_operator_name, extract_arg_name
from .proof import ProofResult, ProofStep, no_match


TRANSITIVE_RELATIONS = frozenset({
    "isA", "locatedIn", "partOf", "subclassOf", "containedIn",
    "before", "after", "causes", "appealsTo", "leadsTo", "enables",
})

# Logical connectives that can show up as arguments but are never entities.
RESERVED_WORDS = frozenset({
    "Implies", "And", "Or", "Not", "ForAll", "Exists",
    "True", "False", "forall", "exists", "implies", "and", "or", "not",
})

DIRECT_CONFIDENCE = 0.9
HOP_DECAY = 0.98


class TransitiveClosure:
    """Walks a relation's edges out of the fact store."""

    def __init__(self, store: FactStore, relations=None):
        self.store = store
        self.relations = frozenset(relations) if relations is not None else TRANSITIVE_RELATIONS

    def find_intermediates(self, relation: str, entity: str) -> list:
        """Direct successors of entity under relation, de-duplicated, in store order."""
        intermediates = []
        for fact in map(coerce_fact, self.store.find_by_arg0(entity)):
            if fact.operator != relation or len(fact.args) < 2:
                continue
            nxt = fact.args[1]
            if not nxt or nxt in RESERVED_WORDS:
                continue
            if nxt == entity or nxt == relation:
                continue
            if nxt not in intermediates:
                intermediates.append(nxt)
        return intermediates

    def find_all_targets(self, relation: str, entity: str) -> list:
        """
        Every entity reachable from entity under relation, depth-first.

        Returns a list of (target, steps) pairs, where steps is the hop path
        from entity to target. Each node is expanded at most once.
        """
        return [(nxt, self._path(stack, hop)) for nxt, hop, stack in self._walk(relation, entity)]

    def find_path(self, relation: str, subject: str, target: str) -> Optional[list]:
        """Hop path of the first walk that reaches target, or None. Stops there."""
        for nxt, hop, stack in self._walk(relation, subject):
            if nxt == target:
                return self._path(stack, hop)
        return None

    def _walk(self, relation: str, entity: str):
        """
        Yield (next, hop, stack) for every edge followed, depth-first.

        Iterative, so chain length is not bounded by the interpreter's
        recursion limit. stack is live: each frame is (name, successors,
        hop that reached name).
        """
        visited = {entity}
        stack = [(entity, iter(self.find_intermediates(relation, entity)), None)]
        while stack:
            name, successors, _ = stack[-1]
            nxt = next(successors, None)
            if nxt is None:
                stack.pop()
                continue
            hop = ProofStep("transitive_step", name, nxt, f"{relation} {name} {nxt}")
            yield nxt, hop, stack
            if nxt in visited:
                continue
            visited.add(nxt)
            stack.append((nxt, iter(self.find_intermediates(relation, nxt)), hop))

    @staticmethod
    def _path(stack: list, hop: ProofStep) -> list:
        return [frame[2] for frame in stack[1:]] + [hop]

    def prove_chain(self, goal: Goal, depth: int = 0) -> ProofResult:
        """
        Prove relation(a, b) by following the relation's edges from a.

        The first path found in depth-first order is the proof. A single
        hop is 'transitive_direct'; longer paths lose HOP_DECAY per extra hop.
        """
        relation = extract_operator_name(goal)
        if relation is None or relation not in self.relations:
            return no_match()
        if len(goal.args) != 2:
            return no_match()
        subject = extract_arg_name(goal.args[0])
        target = extract_arg_name(goal.args[1])
        if not subject or not target:
            return no_match()

        path = self.find_path(relation, subject, target)
        if path is None:
            return no_match()

        if len(path) == 1:
            method, confidence = "transitive_direct", DIRECT_CONFIDENCE
        else:
            method = "transitive_chain"
            confidence = DIRECT_CONFIDENCE * HOP_DECAY ** (len(path) - 1)
        return ProofResult(
            valid=True,
            result=True,
            method=method,
            confidence=confidence,
            goal=str(goal),
            steps=path,
        )
