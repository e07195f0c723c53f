"""Small programs built on the standard containers: deque, list, map, queue and set."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections import deque
from collections.abc import Iterable, Iterator, MutableMapping, Sequence
from dataclasses import dataclass

_LETTERS = frozenset(string.ascii_letters)


@dataclass
class ListItem:
    """One entry of a shopping list."""

    item: str = ""

    def __str__(self) -> str:
        return self.item


def is_palindrome(text: str) -> bool:
    """Return whether the ASCII letters of ``text`` read the same both ways.

    Other characters are ignored; letters are compared exactly as written.
    """
    letters = deque(character for character in text if character in _LETTERS)
    while len(letters) > 1:
        if letters.popleft() != letters.pop():
            return False
    return True


def palindrome_report(line: str) -> str:
    """Return the sentence saying whether ``line`` is a palindrome."""
    if is_palindrome(line):
        return f'Yes, "{line}" is a palindrome.'
    return f'No, "{line}" is not a palindrome.'


def read_until_sentinel(lines: Iterable[str], sentinel: str = "-1") -> Iterator[str]:
    """Yield lines without their newline until ``sentinel`` or the end of input."""
    for line in lines:
        line = line.rstrip("\n")
        if line == sentinel:
            return
        yield line


def shopping_list(lines: Iterable[str]) -> list[ListItem]:
    """Collect items, one per line, until the line ``-1``."""
    return [ListItem(line) for line in read_until_sentinel(lines)]


def default_grades() -> dict[str, float]:
    """Return the preloaded table of student grades."""
    return {
        "Harry Rawlins": 84.3,
        "Stephanie Kong": 91.0,
        "Shailen Tennyson": 78.6,
        "Quincy Wraight": 65.4,
        "Janine Antinori": 98.2,
    }


def update_grade(
    grades: MutableMapping[str, float], name: str, grade: float
) -> list[str]:
    """Set ``name``'s grade in ``grades`` and return the lines describing the change."""
    if name in grades:
        original = grades[name]
        grades[name] = grade
        return [
            f"{name}'s original grade: {original:g}",
            f"{name}'s new grade: {grade:g}",
        ]
    grades[name] = grade
    return ["Original name/grade not found. Adding to the datatable."]


def ticket_queue_report(names: Iterable[str]) -> list[str]:
    """Describe the line moving until the person named ``You`` reaches the front.

    If ``You`` appears more than once, the last position counts.
    """
    line = deque(names)
    position = 0
    for index, name in enumerate(line, start=1):
        if name == "You":
            position = index

    if position == 0:
        return ["You are not in line"]

    report = [
        "Welcome to the ticketing service... ",
        f"You are number {position} in the queue.",
    ]
    while position > 1:
        report.append(f"{line.popleft()} has purchased a ticket.")
        position -= 1
        report.append(f"You are now number {position}")
    report.append("You can now purchase your ticket!")
    return report


def unique_random_ints(
    how_many: int, max_num: int, rng: random.Random | None = None
) -> tuple[list[int], int]:
    """Draw ``how_many`` distinct integers in ``[0, max_num)``.

    Returns the numbers in drawing order and how many draws were repeats.
    """
    if max_num <= 0:
        raise ValueError("max_num must be positive")
    if how_many < 0:
        raise ValueError("how_many must not be negative")
    if how_many > max_num:
        raise ValueError("cannot draw more distinct numbers than the range holds")
    if rng is None:
        rng = random.Random(641)

    seen: set[int] = set()
    numbers: list[int] = []
    retries = 0
    while len(numbers) < how_many:
        value = rng.randrange(max_num)
        if value in seen:
            retries += 1
        else:
            seen.add(value)
            numbers.append(value)
    return numbers, retries


def _run_grades(text_lines: Iterator[str]) -> int:
    name = next(text_lines, "").rstrip("\n")
    tokens = "".join(text_lines).split()
    if not tokens:
        print("A grade is required.", file=sys.stderr)
        return 1
    try:
        grade = float(tokens[0])
    except ValueError:
        print(f"Not a grade: {tokens[0]}", file=sys.stderr)
        return 1
    for line in update_grade(default_grades(), name, grade):
        print(line)
    return 0


def _run_random(text: str) -> int:
    tokens = text.split()
    try:
        how_many, max_num = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        print("Two integers are required.", file=sys.stderr)
        return 1
    try:
        numbers, retries = unique_random_ints(how_many, max_num, random.Random(641))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print("".join(f"{number} " for number in numbers) + f"  [{retries} retries]")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the container programs on standard input."""
    parser = argparse.ArgumentParser(description="Container example programs.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("palindrome", help="check whether a line is a palindrome")
    commands.add_parser("shopping", help="list items until -1")
    commands.add_parser("grades", help="update a student's grade")
    commands.add_parser("tickets", help="simulate a ticket queue")
    commands.add_parser("random", help="draw unique random integers")
    args = parser.parse_args(argv)

    stdin = sys.stdin
    if args.command == "palindrome":
        print(palindrome_report(stdin.readline().rstrip("\n")))
    elif args.command == "shopping":
        for item in shopping_list(stdin):
            print(item)
    elif args.command == "grades":
        return _run_grades(iter(stdin))
    elif args.command == "tickets":
        for line in ticket_queue_report(read_until_sentinel(stdin)):
            print(line)
    else:
        return _run_random(stdin.read())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())