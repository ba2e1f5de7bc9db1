"""
Domain: animals and their colours (bAbI task 16 style).

    isA lily Swan, isA greg Swan, hasProperty greg white
    => hasProperty lily white?  (type induction, low confidence)

Frogs disagree on colour, so nothing is induced for bernhard.
"""

from ..core.state import Fact, FactStore


ANIMAL_FACTS = [
    Fact("isA", ("lily", "Swan")),
    Fact("isA", ("greg", "Swan")),
    Fact("isA", ("julius", "Swan")),
    Fact("hasProperty", ("greg", "white")),
    Fact("hasProperty", ("julius", "white")),
    Fact("isA", ("bernhard", "Frog")),
    Fact("isA", ("brian", "Frog")),
    Fact("isA", ("emily", "Frog")),
    Fact("hasProperty", ("brian", "green")),
    Fact("hasProperty", ("emily", "yellow")),
    Fact("isA", ("mittens", "Cat")),
    Fact("hasProperty", ("mittens", "grey")),
]

ANIMAL_QUERIES = ["lily", "bernhard", "mittens"]


def make_animal_store() -> FactStore:
    return FactStore(facts=list(ANIMAL_FACTS))
