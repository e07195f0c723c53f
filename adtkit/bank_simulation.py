"""An event-driven simulation of customers queueing for a single bank teller."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Event:
    """An arrival or departure of one customer at a given time."""

    customer_id: int
    time: int
    length: int
    is_arrival: bool

    def __lt__(self, other: Event) -> bool:
        return self.time < other.time


@dataclass
class Customer:
    """A customer waiting in line for the teller."""

    customer_id: int
    arrival_time: int
    length: int


@dataclass
class SimulationResult:
    """What happened during a simulation run."""

    processed: list[Event] = field(default_factory=list)
    total_customers: int = 0
    total_wait: int = 0

    def average_wait(self) -> float:
        """Return the mean waiting time; NaN when there were no customers."""
        if self.total_customers == 0:
            return math.nan
        return self.total_wait / self.total_customers


def read_arrivals(text: str) -> list[tuple[int, int]]:
    """Read ``arrival_time transaction_length`` pairs from whitespace-separated text.

    Reading stops at the first token that is not an integer or at an
    incomplete trailing pair.
    """
    arrivals: list[tuple[int, int]] = []
    tokens = iter(text.split())
    for first in tokens:
        second = next(tokens, None)
        if second is None:
            break
        try:
            arrivals.append((int(first), int(second)))
        except ValueError:
            break
    return arrivals


def simulate(arrivals: Iterable[tuple[int, int]]) -> SimulationResult:
    """Run the teller simulation over ``(arrival_time, length)`` pairs.

    Customers are numbered from 1 in input order.
    """
    events = [
        Event(customer_id, time, length, True)
        for customer_id, (time, length) in enumerate(arrivals, start=1)
    ]
    result = SimulationResult(total_customers=len(events))
    heapq.heapify(events)
    line: deque[Customer] = deque()
    teller_available = True

    while events:
        event = heapq.heappop(events)
        result.processed.append(event)
        if event.is_arrival:
            if not line and teller_available:
                heapq.heappush(
                    events,
                    Event(event.customer_id, event.time + event.length, 0, False),
                )
                teller_available = False
            else:
                line.append(Customer(event.customer_id, event.time, event.length))
        elif line:
            customer = line.popleft()
            result.total_wait += event.time - customer.arrival_time
            heapq.heappush(
                events,
                Event(customer.customer_id, event.time + customer.length, 0, False),
            )
        else:
            teller_available = True

    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate the arrivals listed in a file and print a report."""
    parser = argparse.ArgumentParser(description="Simulate a single-teller bank queue.")
    parser.add_argument("path", nargs="?", default="in1.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Error: File not found.")
        return 1

    result = simulate(read_arrivals(text))
    print("Simulation Begins")
    for event in result.processed:
        kind = "arrival" if event.is_arrival else "departure"
        print(f"Processing customer #{event.customer_id} {kind} at time: {event.time}")
    print("Final Statistics: ")
    print(f"    Total number of people processed: {result.total_customers}")
    print(f"    Average amount of time spent waiting: {result.average_wait():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())