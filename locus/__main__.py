"""
CLI entry point. Run as: python -m locus --domain <name>
"""

import argparse

from .core.state import FactStore, Goal, Hole
from .core.proof import print_proof
from .inference.disjoint import DisjointProver
from .engine import prove_goal, query_property
from .visualization import print_store, print_chain, print_candidates, export_dot
from .domains import DOMAINS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Disjointness proofs and type induction")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="rooms",
        help="Which sample fact set to reason over",
    )
    parser.add_argument("--load",  type=str, default=None, help="Load facts from JSON file")
    parser.add_argument("--save",  type=str, default=None, help="Save facts to JSON file")
    parser.add_argument("--prove", type=str, default=None,
                        help='Goal to prove or refute, e.g. "locatedIn apple garden"')
    parser.add_argument("--query", type=str, default=None,
                        help="Entity whose hasProperty value is wanted")
    parser.add_argument("--min-support", type=int, default=1,
                        help="Minimum peer support for type induction")
    parser.add_argument("--chain", type=str, default=None,
                        help="Print the full containment chain of an entity")
    parser.add_argument("--dot",   type=str, default=None, help="Export containment graph to DOT file")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    verbose = not args.quiet
    domain = DOMAINS[args.domain]

    # --- Load or build the store ---
    if args.load:
        store = FactStore.load(args.load)
        print(f"Loaded {len(store)} facts from {args.load}")
    else:
        store = domain["make_store"]()

    print(f"Domain: {args.domain}" if not args.load else f"Facts: {args.load}")
    if verbose:
        print_store(store)

    # --- Goals ---
    if args.prove:
        try:
            goals = [Goal.parse(args.prove)]
        except ValueError as e:
            parser.error(str(e))
    elif args.query or args.chain or args.load:
        goals = []
    else:
        goals = domain.get("goals", [])

    for goal in goals:
        print(f"\nGoal: {goal}")
        print_proof(prove_goal(store, goal, verbose=verbose))

    # --- Property queries ---
    if args.query:
        entities = [args.query]
    elif args.prove or args.chain or args.load:
        entities = []
    else:
        entities = domain.get("queries", [])

    hole = Hole("x")
    for entity in entities:
        print(f"\nQuery: hasProperty {entity} {hole}")
        print_candidates(entity, query_property(store, entity, hole,
                                                min_support=args.min_support,
                                                verbose=verbose))

    if args.chain:
        chain, steps = DisjointProver(store).find_containment_chain_with_steps(args.chain)
        print_chain(args.chain, chain, steps)

    if args.dot:
        export_dot(store, args.dot)

    if args.save:
        store.save(args.save)
        print(f"Facts saved to {args.save}")


if __name__ == "__main__":
    main()
