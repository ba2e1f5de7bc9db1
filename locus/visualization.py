"""
Visualization and reporting utilities.
"""

from .core.state import FactStore


def print_store(store: FactStore):
    """Print every fact in the store, in insertion order."""
    print(f"\n{'='*60}")
    print(f"Facts ({len(store)}):")
    for fact in store:
        print(f"  {fact.name}")
    print(f"{'='*60}")


def print_chain(entity: str, chain: list, steps: list):
    """Print a containment chain and the hops that produced it."""
    print(f"\n{'='*60}")
    print(f"Containment chain of {entity}: {' -> '.join(chain) if chain else '(none)'}")
    print(f"{'='*60}")
    for step in steps:
        print(f"  {step}")


def print_candidates(entity: str, candidates: list):
    """Print query candidates as returned by engine.query_property."""
    if not candidates:
        print(f"  {entity}: no answer")
        return
    for cand in candidates:
        for var, binding in cand["bindings"].items():
            print(f"  {entity}: ?{var} = {binding['answer']}  "
                  f"[{cand['method']}, score {cand['score']}]")
        for line in cand["steps"]:
            print(f"      {line}")


def export_dot(store: FactStore, path="locus_graph.dot", relation="locatedIn"):
    """Export the containment graph as a DOT file for Graphviz visualization."""
    with open(path, "w") as f:
        f.write("digraph locus {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")
        for fact in store.find_by_operator(relation):
            if len(fact.args) < 2:
                continue
            child = fact.args[0].replace('"', '\\"')
            parent = fact.args[1].replace('"', '\\"')
            f.write(f'  "{child}" -> "{parent}";\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
