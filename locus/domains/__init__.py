"""
Domain registry.

Each domain is a dict describing a sample fact set:
    make_store:   () -> FactStore
    goals:        list of Goal to prove or refute   [optional]
    queries:      list of entities whose hasProperty is asked for [optional]
    description:  str
"""

from .rooms import make_room_store, ROOM_GOALS
from .animals import make_animal_store, ANIMAL_QUERIES


DOMAINS = {
    "rooms": {
        "make_store":  make_room_store,
        "goals":       ROOM_GOALS,
        "description": "Containment chains through mutually disjoint rooms",
    },
    "animals": {
        "make_store":  make_animal_store,
        "queries":     ANIMAL_QUERIES,
        "description": "Type induction of colours from unanimous peers",
    },
}
