"""
Domain: rooms of a house.

Objects sit in containers, containers sit in rooms. Rooms are mutually
disjoint, so anything shown to be in the kitchen is provably not in the
garden.

    locatedIn apple basket, locatedIn basket kitchen
    isA kitchen Room, isA garden Room, mutuallyDisjoint Room Room
    => locatedIn apple garden is FALSE

The closet/wardrobe pair forms a cycle on purpose.
"""

from ..core.state import Fact, FactStore, Goal


ROOM_FACTS = [
    Fact("isA", ("kitchen", "Room")),
    Fact("isA", ("garden", "Room")),
    Fact("isA", ("bedroom", "Room")),
    Fact("mutuallyDisjoint", ("Room", "Room")),
    Fact("isA", ("basket", "Container")),
    Fact("isA", ("drawer", "Container")),
    Fact("locatedIn", ("apple", "basket")),
    Fact("locatedIn", ("basket", "kitchen")),
    Fact("locatedIn", ("key", "drawer")),
    Fact("locatedIn", ("drawer", "bedroom")),
    Fact("locatedIn", ("sock", "closet")),
    Fact("locatedIn", ("closet", "wardrobe")),
    Fact("locatedIn", ("wardrobe", "closet")),
]

ROOM_GOALS = [
    Goal("locatedIn", ("apple", "garden")),
    Goal("locatedIn", ("apple", "kitchen")),
    Goal("locatedIn", ("key", "kitchen")),
    Goal("locatedIn", ("sock", "garden")),
]


def make_room_store() -> FactStore:
    return FactStore(facts=list(ROOM_FACTS))
