"""
Proof results and explanation traces.

A ProofResult is what a prover hands back to its caller. A non-match
(valid=False) is the normal "try another strategy" answer, not an error.
ProofSteps are audit records only: nothing reads them back during reasoning.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ProofStep:
    """One unit of reasoning in an explanation trace."""
    operation: str
    source: str = ""
    target: str = ""
    fact: str = ""

    def to_dict(self):
        if self.operation == "chain_step":
            return {"operation": self.operation, "from": self.source,
                    "to": self.target, "fact": self.fact}
        if self.operation == "disjoint_check":
            return {"operation": self.operation, "container": self.source,
                    "target": self.target}
        return {"operation": self.operation, "fact": self.fact}

    def __str__(self):
        if self.operation == "disjoint_check":
            return f"disjoint_check: {self.source} is disjoint from {self.target}"
        return f"{self.operation}: {self.fact}"


def chain_step(source: str, target: str, relation: str = "locatedIn") -> ProofStep:
    return ProofStep("chain_step", source, target, f"{relation} {source} {target}")


@dataclass
class ProofResult:
    """
    Outcome of one prover call.

    valid:      did this strategy reach a conclusion at all?
    result:     truth value of the goal when valid (False = disproven)
    method:     which strategy produced it
    confidence: fixed per strategy
    """
    valid: bool
    result: Optional[bool] = None
    method: Optional[str] = None
    confidence: Optional[float] = None
    goal: Optional[str] = None
    steps: list = field(default_factory=list)

    def to_dict(self):
        if not self.valid:
            return {"valid": False}
        return {
            "valid": True,
            "result": self.result,
            "method": self.method,
            "confidence": self.confidence,
            "goal": self.goal,
            "steps": [s.to_dict() for s in self.steps],
        }

    def __repr__(self):
        if not self.valid:
            return "ProofResult(no match)"
        return f"ProofResult({self.method}: {self.goal} -> {self.result})"


def no_match() -> ProofResult:
    return ProofResult(valid=False)


def print_proof(result: ProofResult):
    """Pretty-print a proof result and its explanation trace."""
    if not result.valid:
        print("No proof found.")
        return
    verdict = "TRUE" if result.result else "FALSE"
    print(f"\n{'='*60}")
    print(f"PROOF ({result.method}, confidence {result.confidence})")
    print(f"{'='*60}")
    for i, step in enumerate(result.steps):
        print(f"  {i+1}. {step}")
    print(f"{'='*60}")
    print(f"  QED: {result.goal} is {verdict}.")
