import argparse
import logging
import os
import sys

from llrb import RedBlackTree
from llrb.models.invariants import check

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Insert integers into a left-leaning red-black tree",
    )
    parser.add_argument("values", type=int, nargs="+", help="Integers to insert, in order")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    tree = RedBlackTree()

    for value in args.values:
        if tree.insert(value):
            logger.info(f"Inserted {value}")
        else:
            logger.warning(f"Rejected duplicate {value}")

    height = check(tree.root)
    print(f"root: {tree.root}")
    print(f"black height: {height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
