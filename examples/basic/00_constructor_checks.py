"""
Example 00: Checking constructor arguments.

Goal:
    Show the checks guarding a small value class, and what the caller
    sees when one of them fails.

Usage:
    python examples/basic/00_constructor_checks.py --verbose
"""
import argparse
import sys
from pathlib import Path

import numpy as np

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from paramassert import (  # noqa: E402
    ParameterAssertionException,
    configure_logging,
    parameter,
    parameter_element_type,
    parameter_key_type,
    parameter_type,
)


class Histogram:
    def __init__(self, edges, labels=None, on_update=None):
        parameter_type("array", edges, "edges")
        parameter_element_type("integer|double", edges, "edges")
        parameter(len(edges) >= 2, "edges", "must contain at least two values")
        parameter_type("array|null", labels, "labels")
        if labels is not None:
            parameter_key_type("integer", labels, "labels")
            parameter_element_type("string", labels, "labels")
        parameter_type("callable|null", on_update, "on_update")
        self.edges = list(edges)
        self.labels = labels
        self.on_update = on_update


def main(argv=None):
    parser = argparse.ArgumentParser(description="Constructor checks demo")
    parser.add_argument("--verbose", action="store_true", help="log failed checks")
    args = parser.parse_args(argv)
    if args.verbose:
        configure_logging(level="DEBUG")

    Histogram(np.linspace(0.0, 1.0, 5), labels=["a", "b", "c", "d"], on_update=print)
    print("valid histogram built")

    for kwargs in (
        {"edges": [0, 1, "2"]},
        {"edges": [0]},
        {"edges": [0, 1], "labels": {"x": "a"}},
        {"edges": [0, 1], "on_update": 5},
    ):
        try:
            Histogram(**kwargs)
        except ParameterAssertionException as exc:
            print(f"{type(exc).__name__}: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
