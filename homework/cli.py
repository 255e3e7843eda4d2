#!/usr/bin/env python3
"""Self-test drivers for the ordered tree and linked deck exercises."""
import random
import sys
from typing import Optional

from homework.config import config
from homework.deck import LinkedDeck, is_sorted, is_stably_sorted
from homework.tree import OrderedTree
from homework.utils.logger import get_logger

logger = get_logger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Random source seeded from config when no seed is given."""
    return random.Random(seed if seed is not None else config.random_seed)


def parse_tree_size(arg: Optional[str]) -> int:
    """Parse the tree test size, falling back to the configured default."""
    default = config.tree_test_size
    if arg is None:
        return default

    try:
        size = int(arg)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
    except ValueError as e:
        print(f"Invalid program argument: {e}.")
        print(f"The size of random generated data will be {default}.")
        logger.warning(f"Falling back to tree test size {default}")
        return default

    return size


def run_tree_test(size: int, rng: random.Random) -> bool:
    """Fill a tree with 0..size-1 in random order, then empty it.

    Args:
        size: Number of distinct values.
        rng: Random source used for both orderings.

    Returns:
        True if every check passed.
    """
    values = list(range(size))
    rng.shuffle(values)

    tree: OrderedTree[int] = OrderedTree()
    for value in values:
        tree.insert(value)

    if tree.size() != size or not tree.check_invariants():
        print(f"Error: tree holds {tree.size()} values, expected {size}.")
        return False
    print(f"Tree was successfully filled with values from 0 to {size}.")

    rng.shuffle(values)
    for value in values:
        tree.erase(value)

    if not tree.empty():
        print(f"Error: tree still holds {tree.size()} values.")
        return False
    print("Tree was successfully emptied.")
    return True


def run_sort_rounds(rounds: int, rng: random.Random) -> int:
    """Shuffle and stably sort one standard deck repeatedly.

    Args:
        rounds: Number of shuffle + sort rounds.
        rng: Random source for the shuffles.

    Returns:
        Number of rounds that failed a check.
    """
    deck = LinkedDeck.standard()
    failures = 0

    for round_id in range(1, rounds + 1):
        deck.shuffle(rng)
        shuffled = deck.to_list()

        deck.stable_selection_sort()

        if not is_sorted(deck):
            print(f"Test {round_id}:\tDeck was not sorted.")
            failures += 1
        elif not is_stably_sorted(deck, shuffled):
            print(f"Test {round_id}:\tDeck was not stably sorted.")
            failures += 1

    logger.info(f"Completed {rounds} sort rounds, {failures} failed")
    return failures


def run_sort_demo(rng: random.Random) -> bool:
    """Print a deck before and after shuffling and sorting."""
    print("Scheme: (rank|suit)")

    deck = LinkedDeck.standard()
    print("Input deck:")
    print(deck)

    deck.shuffle(rng)
    print("Shuffled deck:")
    print(deck)
    shuffled = deck.to_list()

    deck.stable_selection_sort()
    print("Stably sorted deck:")
    print(deck)

    sorted_ok = is_sorted(deck)
    stable_ok = is_stably_sorted(deck, shuffled)
    print(f"Is deck sorted: {str(sorted_ok).lower()}")
    print(f"Is deck stably sorted: {str(stable_ok).lower()}")
    return sorted_ok and stable_ok


def print_usage():
    """Print usage information."""
    print("""
Homework self-tests

Usage:
  homework <command> [args]

Commands:
  tree [size]           Fill and empty a tree with size random values
  sort                  Show one shuffle + stable sort of a standard deck
  sort <rounds>         Run rounds of shuffle + stable sort, report failures

Environment:
  TREE_TEST_SIZE        Default tree size (2048)
  HOMEWORK_SEED         Seed for the random source
  LOG_LEVEL             Logging level (INFO)

Examples:
  homework tree
  homework tree 10000
  homework sort 500
""")


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    command = sys.argv[1].lower()
    arg = sys.argv[2] if len(sys.argv) >= 3 else None
    rng = make_rng()

    if command == "tree":
        if not run_tree_test(parse_tree_size(arg), rng):
            sys.exit(1)

    elif command == "sort":
        if arg is None:
            if not run_sort_demo(rng):
                sys.exit(1)
            return

        try:
            rounds = int(arg)
            if rounds < 0:
                raise ValueError(f"round count must not be negative, got {rounds}")
        except ValueError as e:
            print(f"Fatal error: {e}")
            sys.exit(1)

        if run_sort_rounds(rounds, rng):
            sys.exit(1)

    elif command in ("help", "-h", "--help"):
        print_usage()

    else:
        print(f"Unknown command: {command}")
        print_usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
