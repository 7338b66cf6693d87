"""Drive a restaurant from a whitespace-separated command script."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from cursed_diner.restaurant import Restaurant

DEFAULT_SCRIPT = "test.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(token: str) -> int:
    """Read the integer at the start of ``token``, ignoring anything after it."""
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"expected an integer, got {token!r}")
    return int(match.group(1))


def _argument(tokens: Iterator[str], command: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"{command} is missing an argument") from None


def run(tokens: Iterable[str], restaurant: Restaurant) -> None:
    """Apply a stream of command tokens to ``restaurant``.

    ``MAXSIZE n`` sets the table size; ``RED name energy``, ``BLUE n``,
    ``PURPLE``, ``REVERSAL``, ``UNLIMITED_VOID`` and ``DOMAIN_EXPANSION``
    call the matching ritual. Any other word is read as ``LIGHT n``.
    """
    stream = iter(tokens)
    for command in stream:
        if command == "MAXSIZE":
            restaurant.maxsize = _to_int(_argument(stream, command))
        elif command == "RED":
            name = _argument(stream, command)
            energy = _to_int(_argument(stream, command))
            restaurant.red(name, energy)
        elif command == "BLUE":
            restaurant.blue(_to_int(_argument(stream, command)))
        elif command == "PURPLE":
            restaurant.purple()
        elif command == "REVERSAL":
            restaurant.reversal()
        elif command == "UNLIMITED_VOID":
            restaurant.unlimited_void()
        elif command == "DOMAIN_EXPANSION":
            restaurant.domain_expansion()
        else:
            restaurant.light(_to_int(_argument(stream, command)))


def simulate(path: str | Path, restaurant: Restaurant) -> None:
    """Run the command script stored in the file at ``path``."""
    with open(path, encoding="utf-8") as script:
        run((token for line in script for token in line.split()), restaurant)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a script (``test.txt`` unless a path is given) against a fresh restaurant."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_SCRIPT
    try:
        simulate(path, Restaurant())
    except OSError as error:
        print(f"cannot read {path}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())