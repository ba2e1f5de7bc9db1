"""
Tests for strategy dispatch and property queries.

Core claims:
    - prove_goal returns the first strategy that answers
    - A stored fact wins over a transitive chain, which wins over disjointness
    - Goals nobody can settle come back as a no-match
    - query_property only falls back to induction when no stored value exists
    - Chains longer than the recursion limit still prove and refute
"""

import pytest

from locus.core.state import FactStore, Goal, Hole
from locus.core.proof import ProofResult
from locus.engine import (
    prove_goal, prove_direct, prove_disjoint, query_property, DEFAULT_STRATEGIES,
)
from locus.domains.rooms import make_room_store
from locus.domains.animals import make_animal_store


class TestProveGoal:
    def test_direct_fact(self):
        result = prove_goal(make_room_store(), Goal("locatedIn", ("basket", "kitchen")))
        assert result.method == "direct"
        assert result.result is True
        assert result.confidence == 1.0

    def test_transitive_chain(self):
        result = prove_goal(make_room_store(), Goal("locatedIn", ("apple", "kitchen")))
        assert result.method == "transitive_chain"
        assert result.result is True
        assert result.confidence == pytest.approx(0.9 * 0.98)

    def test_disjoint_refutation(self):
        result = prove_goal(make_room_store(), Goal("locatedIn", ("apple", "garden")))
        assert result.method == "disjoint_proof"
        assert result.result is False
        assert result.confidence == 0.95

    def test_unsettled_goal(self):
        result = prove_goal(make_room_store(), Goal("locatedIn", ("sock", "garden")))
        assert not result.valid

    def test_strategies_tried_in_order(self):
        calls = []

        def first(store, goal, depth, verbose):
            calls.append("first")
            return ProofResult(valid=False)

        def second(store, goal, depth, verbose):
            calls.append("second")
            return ProofResult(valid=True, result=True, method="second", goal=str(goal))

        def third(store, goal, depth, verbose):
            calls.append("third")
            return ProofResult(valid=True, result=False, method="third")

        result = prove_goal(FactStore(), Goal("p", ("a", "b")), strategies=[first, second, third])
        assert result.method == "second"
        assert calls == ["first", "second"]

    def test_default_strategy_order(self):
        assert DEFAULT_STRATEGIES[0] is prove_direct
        assert DEFAULT_STRATEGIES[-1] is prove_disjoint

    def test_direct_rejects_holes(self):
        store = FactStore(facts=[("locatedIn", "a", "b")])
        assert not prove_direct(store, Goal("locatedIn", ("a", Hole("x")))).valid


class TestQueryProperty:
    def test_direct_value_wins(self):
        results = query_property(make_animal_store(), "mittens", Hole("x"))
        assert len(results) == 1
        assert results[0]["method"] == "direct"
        assert results[0]["bindings"]["x"]["answer"] == "grey"
        assert results[0]["factName"] == "hasProperty mittens grey"

    def test_falls_back_to_induction(self):
        results = query_property(make_animal_store(), "lily", Hole("x"))
        assert results[0]["method"] == "type_induction"
        assert results[0]["bindings"]["x"]["answer"] == "white"
        assert results[0]["score"] == 0.35

    def test_no_fallback_when_direct_exists(self):
        store = make_animal_store()
        store.add(("hasProperty", "lily", "black"))
        results = query_property(store, "lily", Hole("x"))
        assert [r["method"] for r in results] == ["direct"]
        assert results[0]["bindings"]["x"]["answer"] == "black"

    def test_disagreeing_peers_give_nothing(self):
        assert query_property(make_animal_store(), "bernhard", Hole("x")) == []

    def test_default_hole(self):
        results = query_property(make_animal_store(), "lily")
        assert "x" in results[0]["bindings"]

    def test_hole_given_as_text(self):
        results = query_property(make_animal_store(), "mittens", "?colour")
        assert results[0]["bindings"]["colour"]["answer"] == "grey"

    def test_hole_given_as_mapping_on_fallback(self):
        results = query_property(make_animal_store(), "lily", {"name": "colour"})
        assert results[0]["method"] == "type_induction"
        assert results[0]["bindings"]["colour"]["answer"] == "white"

    def test_unusable_hole_is_rejected(self):
        with pytest.raises(ValueError):
            query_property(make_animal_store(), "mittens", 42)


class TestDeepChains:
    DEPTH = 3000

    def _chain_store(self):
        store = FactStore(facts=[("locatedIn", f"n{i}", f"n{i+1}") for i in range(self.DEPTH)])
        store.add_all([
            ("isA", f"n{self.DEPTH}", "Room"),
            ("isA", "t", "Room"),
            ("mutuallyDisjoint", "Room", "Room"),
        ])
        return store

    def test_disjoint_refutation_past_recursion_limit(self):
        result = prove_goal(self._chain_store(), Goal("locatedIn", ("n0", "t")))
        assert result.method == "disjoint_proof"
        assert result.result is False
        assert len(result.steps) == self.DEPTH + 1
        assert result.steps[-1].operation == "disjoint_check"

    def test_transitive_proof_past_recursion_limit(self):
        result = prove_goal(self._chain_store(), Goal("locatedIn", ("n0", f"n{self.DEPTH}")))
        assert result.method == "transitive_chain"
        assert len(result.steps) == self.DEPTH
