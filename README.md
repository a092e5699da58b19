# rpncalc

A small calculator for expressions written in Reverse Polish Notation
(postfix). Operands live on a bounded stack that holds at most 20 values.

## Installing

```
pip install .
```

## Interactive use

```
rpncalc
```

The command prints a welcome line and then, for each line read from
standard input, a prompt followed by the result or an error message. It
stops when the input ends; Ctrl-C also ends it cleanly.

```
Welcome to the RPN calculator.
Enter floats and + - / * in RPN format:
1 4 + 6 4 - * 8 /
result = 1.250000
```

A line holds space-separated numbers and the operators `+`, `-`, `*` and
`/`. Results are printed with six decimal places. The messages for bad input
are:

- `Error: TOO MANY CHARACTERS` for a line longer than 60 characters
  (not counting the line ending); the line is not evaluated.
- `Error: STACK OVERFLOW ERROR` when more than 20 values would be on the stack.
- `Error: STACK UNDERFLOW ERROR or TOO FEW ITEMS ERROR` when an operator has
  fewer than two operands, or when nothing is left at the end.
- `Error: INVALID TOKEN ERROR` for a token that is neither a number nor an
  operator.
- `Error: DIVIDE BY ZERO ERROR` for division by zero.
- `Error: TOO MANY ITEMS ERROR` when more than one value is left at the end.

`rpncalc --help` shows the usage; the command takes no other options.

## As a library

```python
from rpncalc.rpn import evaluate, RpnError, RpnErrorCode

evaluate("5 6 - 3 * 5 +")        # 2.0

try:
    evaluate("1 4 / 4 * 0 /")
except RpnError as exc:
    assert exc.code is RpnErrorCode.DIVIDE_BY_ZERO
```

`evaluate` splits its input on spaces only. A token is read as a number when
it begins with a numeric value (so `3abc` counts as 3) or starts with `0`;
otherwise its first character must be one of `+ - * /`. Every failure raises
`RpnError`, whose `code` is an `RpnErrorCode` member (`STACK_OVERFLOW`,
`STACK_UNDERFLOW`, `INVALID_TOKEN`, `DIVIDE_BY_ZERO`,
`TOO_FEW_ITEMS_REMAIN`, `TOO_MANY_ITEMS_REMAIN`) and whose `token` is the
offending token where there is one.

`rpncalc.rpn.process_backspaces` returns its text with each backspace
character (`"\b"`) removed together with the character before it, if any:

```python
from rpncalc.rpn import process_backspaces

process_backspaces("123\b34")   # "1234"
```

`rpncalc.cli.describe_error` turns an `RpnError` or an error code into the
message the command prints, and `rpncalc.cli.run(lines, out)` runs the
prompt-and-evaluate loop over any iterable of lines, writing to `out`.

The interactive command does not apply `process_backspaces` to its input.

## The stack

```python
from rpncalc.stack import Stack, StackFullError

stack = Stack()          # capacity 20; Stack(capacity=5) for another size
stack.push(10.1)
stack.peek()      # 10.1
len(stack)        # 1
stack.pop()       # 10.1
stack.is_empty()  # True
stack.is_full()   # False
```

Pushing onto a full stack raises `StackFullError`. Popping or peeking an
empty stack raises `StackEmptyError`, which is also an `IndexError`. Both are
subclasses of `StackError`. A capacity below 1 raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```