"""Simple CLI that builds a tree from keys and prints its shape.

Usage:
    python render_tree.py [--keys 7,3,8] [--order given|asc|desc] \
        [--trace] [--log-path PATH]

Values default to environment variables TREE_KEYS, TREE_ORDER,
TREE_TRACE and TREE_LOG_PATH when set.
"""

import argparse
import logging
import os
import sys
from typing import List

from redblacktree import EventLogger, Tree, check_invariants

_TRUTHY = {"1", "true", "yes", "on"}


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    env = os.environ
    parser = argparse.ArgumentParser(description="Render a left-leaning red-black tree")
    parser.add_argument("--keys", default=env.get("TREE_KEYS", ""))
    parser.add_argument(
        "--order",
        choices=("given", "asc", "desc"),
        default=env.get("TREE_ORDER", "given"),
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=env.get("TREE_TRACE", "").lower() in _TRUTHY,
    )
    parser.add_argument("--log-path", dest="log_path", default=env.get("TREE_LOG_PATH"))
    return parser.parse_args(argv)


def parse_keys(keys_str: str) -> list:
    items = [item.strip() for item in keys_str.split(",") if item.strip()]
    try:
        return [int(item) for item in items]
    except ValueError:
        return items


def build_tree(keys: list, order: str = "given", *, trace: bool = False, event_logger=None) -> Tree:
    if order == "asc":
        keys = sorted(keys)
    elif order == "desc":
        keys = sorted(keys, reverse=True)
    tree = Tree(trace=trace, event_logger=event_logger)
    for key in keys:
        tree.put(key, f"payload{key}")
    return tree


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    if args.trace and not args.log_path:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    event_logger = EventLogger(args.log_path) if args.log_path else None
    try:
        tree = build_tree(
            parse_keys(args.keys), args.order, trace=args.trace, event_logger=event_logger
        )
    finally:
        if event_logger:
            event_logger.close()

    print(tree)
    print(f"size: {tree.size()}")
    if tree.root is not None:
        print(f"root: {tree.root.key}")
    problems = check_invariants(tree)
    for problem in problems:
        print(f"invariant violated: {problem}", file=sys.stderr)
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
