#!/usr/bin/env python3
"""
bitint command line calculator.

Applies one operation to binary operands and prints the result in
binary, most significant bit first.

Note: arguments are read from sys.argv by hand. Operands such as
"-101" start with a dash, so flags are only recognised before the
operation name.

Usage:
    python cli.py [-D] [--be | --le] <op> <a> [<b>]

Examples:
    python cli.py add 101 11          # 1000
    python cli.py div -111 11         # -10
    python cli.py --be mul 101 -11    # -1111
"""

import logging
import sys

from bitint import BitVectorBE, BitVectorError, BitVectorLE, __version__

BINARY_OPS = {
    "add": lambda a, b: a.add(b),
    "sub": lambda a, b: a.subtract(b),
    "mul": lambda a, b: a.multiply(b),
    "div": lambda a, b: a.divide(b),
    "and": lambda a, b: a.and_(b),
    "or": lambda a, b: a.or_(b),
    "xor": lambda a, b: a.xor(b),
}

UNARY_OPS = {
    "neg": lambda a: a.negate(),
}


def print_version() -> None:
    """Print version information."""
    print(f"bitint {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"bitint: bit vector integer arithmetic (v{__version__})")
    print("=" * 44)
    print()
    print("Usage:")
    print(f"  {prog_name} [-D] [--be | --le] <op> <a> [<b>]")
    print()
    print("Options:")
    print("  --le           Direct storage layout (default)")
    print("  --be           Reversed storage layout")
    print("  -D, --debug    Log arithmetic steps to stderr")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Operations:")
    print("  add sub mul div   Arithmetic (division truncates toward zero)")
    print("  and or xor        Bitwise, over the stored bits of <a>")
    print("  cmp               Print -1, 0 or 1")
    print("  neg               Negate <a>")
    print()
    print("Operands:")
    print("  Binary digits, most significant first, optional '-' sign")
    print()
    print("Examples:")
    print(f"  {prog_name} add 101 11          # 1000")
    print(f"  {prog_name} div -111 11         # -10")
    print(f"  {prog_name} --be mul 101 -11    # -1111")
    print()


def evaluate(layout, op: str, operands: "list[str]") -> str:
    """Evaluate one operation.

    Args:
        layout: BitVectorLE or BitVectorBE.
        op: Operation name.
        operands: Binary operand strings.

    Returns:
        Result as printed by the CLI.

    Raises:
        BitVectorError: On malformed operands or arithmetic errors.
    """
    vectors = [layout.from_string(text) for text in operands]

    if op == "cmp":
        order = vectors[0].compare_to(vectors[1])
        return str((order > 0) - (order < 0))
    if op in UNARY_OPS:
        return str(UNARY_OPS[op](vectors[0]))
    return str(BINARY_OPS[op](vectors[0], vectors[1]))


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    if len(args) < 2:
        print_help(prog_name)
        return 1

    layout = BitVectorLE
    rest = args[1:]
    while rest and rest[0] in ("-h", "--help", "-v", "--version", "-D", "--debug", "--be", "--le"):
        flag = rest.pop(0)
        if flag in ("-h", "--help"):
            print_help(prog_name)
            return 0
        if flag in ("-v", "--version"):
            print_version()
            return 0
        if flag in ("-D", "--debug"):
            logging.basicConfig(
                level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
            )
        elif flag == "--be":
            layout = BitVectorBE
        else:
            layout = BitVectorLE

    if not rest:
        print("Error: Missing operation", file=sys.stderr)
        return 1

    op = rest[0]
    operands = rest[1:]

    if op in BINARY_OPS or op == "cmp":
        expected = 2
    elif op in UNARY_OPS:
        expected = 1
    else:
        print(f"Error: Unknown operation: {op}", file=sys.stderr)
        return 1

    if len(operands) != expected:
        print(
            f"Error: {op} requires {expected} operand{'s' if expected > 1 else ''}",
            file=sys.stderr,
        )
        print(f"Usage: {prog_name} [-D] [--be | --le] <op> <a> [<b>]", file=sys.stderr)
        return 1

    try:
        result = evaluate(layout, op, operands)
    except BitVectorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
