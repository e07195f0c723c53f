# adtkit

A small collection of classic abstract data types with fixed, predictable
behaviour: explicit limits, specific exceptions and documented orderings.
There are no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `adtkit.array_set` | `ArraySet`, a set with a fixed capacity (6 by default) that compares items with `==`. Raises `CapacityExceededError`, `DuplicateItemError` and `ItemNotFoundError`. |
| `adtkit.array_stack` | `ArrayStack`, a stack whose tracked capacity doubles when full and halves when a pop leaves it under half used. Raises `StackEmptyError`. |
| `adtkit.hashed_dictionary` | `HashedDictionary`, a separately chained hash table keyed by strings (101 buckets by default), plus `Entry`, `FamousPerson` and `NotFoundError`. |
| `adtkit.max_heap` | `MaxHeap`, an array-backed max-heap of integers that can write each swap to a text stream; `+` merges two heaps. |
| `adtkit.bst_checker` | `Node` (with a parser for `(key, left, right)` strings) and `check_bst_validity`. |
| `adtkit.bank_simulation` | An event-driven single-teller bank queue simulation: `read_arrivals`, `simulate`, `SimulationResult`. |
| `adtkit.containers` | Small programs on standard containers: palindromes, shopping lists, grade tables, ticket queues and unique random integers. |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Fixed-capacity set

```python
from adtkit.array_set import ArraySet, DuplicateItemError

s = ArraySet(capacity=4)
s.insert("one")
s.insert("two")
try:
    s.insert("one")
except DuplicateItemError:
    print("no duplicates allowed")

other = ArraySet(capacity=4)
other.insert("two")
other.insert("three")

print(len(s.union(other)))              # 3
print(s.intersection(other).to_list())  # ['two']
print("one" in s.difference(other))     # True
```

`union`, `intersection` and `difference` return new sets of the default
capacity (6), so a union of more than six items raises
`CapacityExceededError`. `erase` moves the last item into the freed slot.

### Stack

```python
from adtkit.array_stack import ArrayStack

stack = ArrayStack()
for letter in "ABC":
    stack.push(letter)
print(stack.top())    # C
print(stack.pop())    # C
print(len(stack))     # 2
print(stack.capacity) # 2
```

### Hash dictionary

```python
from adtkit.hashed_dictionary import HashedDictionary

d = HashedDictionary()
d.add("Lovelace", "analyst")
print("Lovelace" in d)          # True
print(d.get_item("Lovelace"))   # analyst
print(d["Lovelace"])            # analyst
print(d.remove("Babbage"))      # False
```

A key's bucket is the sum of its character codes modulo the table size.
`add` does not reject duplicate keys; lookups and removals find the most
recently added entry. A missing key raises `NotFoundError` (a `KeyError`).

### Max-heap

```python
import sys
from adtkit.max_heap import MaxHeap

heap = MaxHeap()
for value in range(10):
    heap.insert(value)
print(heap.remove())  # 9

traced = MaxHeap(trace=sys.stdout)   # prints each insertion and swap
traced.insert(1)
traced.insert(5)

merged = heap + traced
print(len(merged))    # 11
```

### BST validity

```python
from adtkit.bst_checker import Node, check_bst_validity

root = Node.parse("(10, (20), (30, (29), (31)))")
print(check_bst_validity(root).key)  # 20

tree = Node(68)
tree.insert_all([77, 75, 73, 71, 76, 54, 19, 91, 12])
print(check_bst_validity(tree))      # None
```

`check_bst_validity` returns the first node, in preorder, whose key lies
outside the bounds set by its ancestors or whose child refers to a node
already visited, or `None` for a valid tree.

### Bank queue simulation

```python
from adtkit.bank_simulation import read_arrivals, simulate

result = simulate(read_arrivals("1 5\n2 5\n4 5"))
print(result.total_customers)  # 3
print(result.total_wait)       # 11
print(result.average_wait())
```

### Container programs

```python
from adtkit.containers import is_palindrome, unique_random_ints

print(is_palindrome("never odd or even"))  # True
print(is_palindrome("Racecar"))            # False: letters compare as written

numbers, retries = unique_random_ints(5, 10)
```

## Commands

Installing the package provides these commands:

- `adtkit-stack-demo` pushes the letters `A` to `J` on a stack, then pops
  and prints them.
- `adtkit-bank-sim [PATH]` reads arrival time and transaction length pairs
  from `PATH` (default `in1.txt`), prints each processed event and the
  final statistics.
- `adtkit-containers COMMAND` reads standard input, where `COMMAND` is one of
  `palindrome`, `shopping`, `grades`, `tickets` or `random`. Lists for
  `shopping` and `tickets` end at a line `-1`; `grades` takes a name line
  and then a grade; `random` takes a count and an upper bound.
- `adtkit-heap-demo` shows traced heap insertions, removals and a merge of
  two heaps.
- `adtkit-famous [PATH]` reads records from `PATH` (default `famous.txt`),
  echoing each line and last name as it loads them into a hash dictionary.

## Limits

- Everything lives in memory; nothing is saved to disk.
- `adtkit-famous` only loads records; it offers no way to look people up
  or list them afterwards. A missing file is treated as empty.
- The sets and the dictionary do not grow: an `ArraySet` keeps its
  capacity, and a `HashedDictionary` keeps its bucket count.