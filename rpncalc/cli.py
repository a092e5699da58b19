"""Interactive RPN calculator reading expressions line by line."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from .rpn import RpnError, RpnErrorCode, evaluate

MAX_INPUT_LENGTH = 60

WELCOME = "Welcome to the RPN calculator.\n"
PROMPT = "Enter floats and + - / * in RPN format:\n"
TOO_MANY_CHARACTERS = "Error: TOO MANY CHARACTERS"

_ERROR_TEXT = {
    RpnErrorCode.STACK_OVERFLOW: "Error: STACK OVERFLOW ERROR",
    RpnErrorCode.STACK_UNDERFLOW: "Error: STACK UNDERFLOW ERROR or TOO FEW ITEMS ERROR",
    RpnErrorCode.TOO_FEW_ITEMS_REMAIN: "Error: STACK UNDERFLOW ERROR or TOO FEW ITEMS ERROR",
    RpnErrorCode.INVALID_TOKEN: "Error: INVALID TOKEN ERROR",
    RpnErrorCode.DIVIDE_BY_ZERO: "Error: DIVIDE BY ZERO ERROR",
    RpnErrorCode.TOO_MANY_ITEMS_REMAIN: "Error: TOO MANY ITEMS ERROR",
}


def describe_error(error: RpnError | RpnErrorCode | int) -> str:
    """Return the message shown to the user for an evaluation error."""
    code = error.code if isinstance(error, RpnError) else RpnErrorCode(error)
    return _ERROR_TEXT[code]


def run(lines: Iterable[str], out: TextIO) -> None:
    """Prompt for, evaluate and report each line until the input ends."""
    remaining = iter(lines)
    while True:
        out.write(PROMPT)
        line = next(remaining, None)
        if line is None:
            return
        sentence = line.rstrip("\r\n")
        if len(sentence) > MAX_INPUT_LENGTH:
            out.write(TOO_MANY_CHARACTERS + "\n")
            continue
        try:
            result = evaluate(sentence)
        except RpnError as error:
            out.write(describe_error(error) + "\n")
        else:
            out.write(f"result = {result:f}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="Evaluate Reverse Polish Notation expressions read from standard input.",
    )
    parser.parse_args(argv)
    sys.stdout.write(WELCOME)
    try:
        run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())