"""
Core data structures: Fact, FactStore, Goal, Hole.

These are the atoms of the whole system. Nothing in here depends on
provers, induction, or sample domains.

Facts are ground binary relations:
    Fact("locatedIn", ("cat1", "kitchen"))   ->  locatedIn cat1 kitchen
    Fact("isA", ("cat1", "Cat"))             ->  isA cat1 Cat

Entities have no record of their own. An entity is just a name that
some facts happen to mention.

Query variables are Holes: Hole("x") or the string "?x".
"""

from dataclasses import dataclass, field
from typing import Optional
import json


class MalformedFactError(ValueError):
    """A fact record lacks an operator or an argument list."""


@dataclass(frozen=True)
class Fact:
    """A ground relational statement. Immutable once built."""
    operator: str
    args: tuple = ()

    def __post_init__(self):
        if not isinstance(self.operator, str) or not self.operator:
            raise MalformedFactError(f"fact operator must be a non-empty string, got {self.operator!r}")
        if not isinstance(self.args, (tuple, list)):
            raise MalformedFactError(f"fact args must be a sequence, got {self.args!r}")
        if not all(isinstance(a, str) for a in self.args):
            raise MalformedFactError(f"fact args must be entity names, got {self.args!r}")
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def name(self):
        return " ".join((self.operator,) + self.args)

    def arg(self, index: int) -> Optional[str]:
        return self.args[index] if index < len(self.args) else None

    def __repr__(self):
        return f"Fact({self.name})"


def coerce_fact(raw) -> Fact:
    """
    Turn a collaborator's fact record into a Fact.

    Accepts a Fact, a mapping {"operator": ..., "args": [...]}, or a tuple
    ("operator", arg0, arg1, ...). Anything missing an operator or an
    argument list raises MalformedFactError rather than being skipped.
    """
    if isinstance(raw, Fact):
        return raw
    if isinstance(raw, dict):
        if "operator" not in raw or "args" not in raw:
            raise MalformedFactError(f"fact record needs 'operator' and 'args': {raw!r}")
        return Fact(raw["operator"], raw["args"])
    if isinstance(raw, (tuple, list)) and raw:
        return Fact(raw[0], tuple(raw[1:]))
    raise MalformedFactError(f"not a fact record: {raw!r}")


@dataclass
class FactStore:
    """
    In-memory fact store, indexed by operator and by argument position.

    All lookups return facts in insertion order, so every traversal over
    the store is reproducible. Duplicates are dropped on insert.
    """
    facts: list = field(default_factory=list)
    _seen: set = field(default_factory=set, init=False, repr=False)
    _by_operator: dict = field(default_factory=dict, init=False, repr=False)
    _by_arg0: dict = field(default_factory=dict, init=False, repr=False)
    _by_arg1: dict = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        initial, self.facts = list(self.facts), []
        self.add_all(initial)

    def add(self, raw) -> bool:
        fact = coerce_fact(raw)
        if fact in self._seen:
            return False
        self._seen.add(fact)
        self.facts.append(fact)
        self._by_operator.setdefault(fact.operator, []).append(fact)
        if fact.arg(0) is not None:
            self._by_arg0.setdefault(fact.arg(0), []).append(fact)
        if fact.arg(1) is not None:
            self._by_arg1.setdefault(fact.arg(1), []).append(fact)
        return True

    def add_all(self, facts) -> int:
        return sum(1 for f in facts if self.add(f))

    def find_by_arg0(self, name: str) -> list:
        return list(self._by_arg0.get(name, ()))

    def find_by_arg1(self, name: str) -> list:
        return list(self._by_arg1.get(name, ()))

    def find_by_operator(self, operator: str) -> list:
        return list(self._by_operator.get(operator, ()))

    def holds(self, operator: str, *args) -> bool:
        return Fact(operator, args) in self._seen

    def __iter__(self):
        return iter(list(self.facts))

    def __len__(self):
        return len(self.facts)

    def __contains__(self, raw):
        return coerce_fact(raw) in self._seen

    def to_dict(self):
        return {"facts": [{"operator": f.operator, "args": list(f.args)} for f in self.facts]}

    @classmethod
    def from_dict(cls, d):
        if "facts" not in d:
            raise MalformedFactError("fact store dump has no 'facts' list")
        return cls(facts=list(d["facts"]))

    def save(self, path="locus_facts.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="locus_facts.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))


@dataclass(frozen=True)
class Hole:
    """An unresolved query variable. The name is the binding key."""
    name: str

    @classmethod
    def parse(cls, text: str) -> 'Hole':
        return cls(text[1:] if text.startswith("?") else text)

    def __str__(self):
        return f"?{self.name}"


def coerce_hole(raw) -> Hole:
    """
    Turn a caller's query variable into a Hole.

    Accepts a Hole, "?x" or "x" text, a mapping with a "name" key, or any
    object with a string .name attribute. Anything else is a ValueError.
    """
    if isinstance(raw, Hole):
        return raw
    if isinstance(raw, str):
        name = Hole.parse(raw.strip()).name
    elif isinstance(raw, dict):
        name = raw.get("name")
    else:
        name = getattr(raw, "name", None)
    if not isinstance(name, str) or not name:
        raise ValueError(f"not a query variable: {raw!r}")
    return Hole(name)


@dataclass(frozen=True)
class Goal:
    """A goal statement: operator name plus argument terms (names or Holes)."""
    operator: str
    args: tuple = ()

    @classmethod
    def parse(cls, text: str) -> 'Goal':
        """'locatedIn cat1 ?where' -> Goal('locatedIn', ('cat1', Hole('where')))"""
        parts = text.split()
        if not parts:
            raise ValueError("empty goal")
        args = tuple(Hole.parse(p) if p.startswith("?") else p for p in parts[1:])
        return cls(parts[0], args)

    def __str__(self):
        return " ".join([self.operator] + [str(a) for a in self.args])


def extract_operator_name(goal) -> Optional[str]:
    operator = getattr(goal, "operator", None)
    if isinstance(operator, str) and operator:
        return operator
    return None


def extract_arg_name(term) -> Optional[str]:
    """Resolve a goal argument to an entity name; holes and junk give None."""
    if isinstance(term, Hole):
        return None
    if not isinstance(term, str) or not term or term.startswith("?"):
        return None
    return term
