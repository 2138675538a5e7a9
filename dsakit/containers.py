"""Linked queue and stack, and the command scripts that drive them."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

EMPTY_TEXT = "EMPTY"
DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


@dataclass(eq=False, slots=True)
class _Link:
    key: int
    next: _Link | None = None


def _walk(link: _Link | None) -> Iterator[int]:
    while link is not None:
        yield link.key
        link = link.next


def _render(keys: Iterable[int]) -> str:
    text = "".join(f"{key} " for key in keys)
    return text or EMPTY_TEXT


class LinkedQueue:
    """A first-in first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._head: _Link | None = None
        self._tail: _Link | None = None

    def __iter__(self) -> Iterator[int]:
        return _walk(self._head)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def enqueue(self, key: int) -> None:
        """Add key at the back."""
        link = _Link(key)
        if self._tail is None:
            self._head = self._tail = link
        else:
            self._tail.next = link
            self._tail = link

    def dequeue(self) -> int:
        """Remove and return the front key; raise IndexError if the queue is empty."""
        if self._head is None:
            raise IndexError("dequeue from an empty queue")
        link = self._head
        self._head = link.next
        if self._head is None:
            self._tail = None
        return link.key

    def render(self) -> str:
        """Return the keys front to back, each followed by a space, or ``EMPTY``."""
        return _render(self)


class LinkedStack:
    """A last-in first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Link | None = None

    def __iter__(self) -> Iterator[int]:
        return _walk(self._top)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def push(self, key: int) -> None:
        """Put key on top."""
        self._top = _Link(key, self._top)

    def pop(self) -> int:
        """Remove and return the top key; raise IndexError if the stack is empty."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        link = self._top
        self._top = link.next
        return link.key

    def render(self) -> str:
        """Return the keys top to bottom, each followed by a space, or ``EMPTY``."""
        return _render(self)


def _parse_int(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


_C = TypeVar("_C", LinkedQueue, LinkedStack)


def _run_script(
    tokens: Iterable[str],
    factory: Callable[[], _C],
    add_command: str,
    add: Callable[[_C, int], None],
    remove_command: str,
    remove: Callable[[_C], int],
) -> list[str]:
    lines: list[str] = []
    container: _C | None = None
    stream = iter(tokens)
    for token in stream:
        line = ""
        if token == "init":
            container = factory()
            line = container.render()
        elif token == add_command:
            if container is not None:
                raw = next(stream, None)
                if raw is not None:
                    add(container, _parse_int(raw))
                    line = container.render()
        elif token == remove_command:
            if container is not None:
                try:
                    remove(container)
                except IndexError:
                    pass
                line = container.render()
        lines.append(line)
    return lines


def run_queue_script(tokens: Iterable[str]) -> list[str]:
    """Run ``init``/``enqueue <n>``/``dequeue`` commands; return one output line per command word."""
    return _run_script(
        tokens, LinkedQueue, "enqueue", LinkedQueue.enqueue, "dequeue", LinkedQueue.dequeue
    )


def run_stack_script(tokens: Iterable[str]) -> list[str]:
    """Run ``init``/``push <n>``/``pop`` commands; return one output line per command word."""
    return _run_script(tokens, LinkedStack, "push", LinkedStack.push, "pop", LinkedStack.pop)


def main(argv: list[str] | None = None) -> int:
    """Run a queue or stack command file and write the states after each command."""
    parser = argparse.ArgumentParser(description="Run queue or stack commands from a file.")
    parser.add_argument("structure", choices=("queue", "stack"))
    parser.add_argument("--input", default=DEFAULT_INPUT)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    runner = run_queue_script if args.structure == "queue" else run_stack_script
    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print(f"cannot open {args.input}", file=sys.stderr)
        return 1
    try:
        lines = runner(text.split())
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    try:
        Path(args.output).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    except OSError:
        print(f"cannot open {args.output}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())