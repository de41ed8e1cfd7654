# structlab

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Operations on an empty container raise an error, positional
operations check their bounds, and counted quantities such as average search
lengths and KMP `next` tables follow the textbook definitions.

## Installation

```
pip install structlab
```

To run the test suite:

```
pip install "structlab[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `structlab.linked_list` | `LinkedList` (`push_back`, `push_front`, `insert`, `pop_back`, `pop_front`, `erase`, `reverse`, `bubble_sort`), `sorted_list`, `merge_sorted` |
| `structlab.double_linked_list` | `DoublyLinkedList` and `CircularDoublyLinkedList` with `insert` and `erase`, iterable forwards and with `reversed()` |
| `structlab.polynomial` | `Term` and `Polynomial`; terms are kept in ascending exponent order, equal exponents are combined, and polynomials add with `+` |
| `structlab.general_list` | `parse` for strings such as `(a,(b,c),y)`; `GeneralList` with `len`, `depth`, `head` and `tail`; `Atom` |
| `structlab.stacks` | `LinkedStack`, `ArrayStack` (fixed capacity), `StackEmptyError`, `StackFullError`, `run_commands` |
| `structlab.queues` | `LinkedQueue`, `ArrayQueue`, `CircularQueue`, `QueueEmptyError`, `QueueFullError` |
| `structlab.expression` | `infix_to_postfix`, `evaluate_postfix`, `calculate`, `mirror`, `evaluate_prefix`, `evaluate_prefix_expression`, `normalize_unary`, `precedence`, `is_valid_parentheses` |
| `structlab.string_match` | `brute_force_search`, `kmp_search`, `kmp_nextval_search`, `next_array`, `nextval_array` |
| `structlab.josephus` | `elimination_order` and `josephus` |
| `structlab.btree` | `BTree` (order 4 by default) with `insert`, `in`, `level_order` and a level-by-level `str` |
| `structlab.hashing` | `LinearProbingTable`, `QuadraticProbingTable`, `ChainedHashTable`, each with `insert`, `search`, `delete`, `asl_success` and `asl_fail` |

## Examples

```python
from structlab.linked_list import LinkedList
from structlab.stacks import LinkedStack
from structlab.expression import infix_to_postfix, calculate, is_valid_parentheses
from structlab.string_match import kmp_search, next_array
from structlab.josephus import josephus
from structlab.btree import BTree
from structlab.hashing import LinearProbingTable

items = LinkedList([10, 20, 30])
items.push_front(5)
items.insert(2, 15)
list(items)                      # [5, 10, 15, 20, 30]

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.top()                      # 2
len(stack)                       # 2

infix_to_postfix("9 + ( 3 - 1 ) * 3 + 10 / 2")   # '9 3 1 - 3 * + 10 2 / +'
calculate("1-(-2)")              # 3
is_valid_parentheses("([]{})")   # True

next_array("abaabc")
kmp_search("ababab", "abab")     # [(0, 3), (2, 5)]

josephus(10, 4)                  # number of the last person left

tree = BTree(range(1, 16))
15 in tree                       # True
print(tree)

table = LinearProbingTable([10, 25, 17, 6, 24])
table.search(25)                 # slot holding 25, or None if absent
str(table.asl_success())         # fraction such as 'total/count'
```

Division in expressions truncates toward zero. `search` on a hash table returns
`None` for a missing key; `delete` raises `KeyError`. Average search lengths are
returned as `SearchLength(total, count)`, whose `str` is the unreduced fraction
and whose `value` is the float.

## Errors

Popping or reading from an empty stack or queue raises `StackEmptyError` or
`QueueEmptyError` (both subclasses of `IndexError`). Pushing onto a full
`ArrayStack`, `ArrayQueue` or `CircularQueue` raises `StackFullError` or
`QueueFullError`. `ArrayQueue` never reuses slots that were popped, so it
reports itself full once `capacity` values have been pushed. `CircularQueue`
keeps one slot free and holds `slots - 1` values. An out-of-range position
passed to `insert` or `erase`, or popping from an empty `LinkedList`, raises
`IndexError`. `head` and `tail` of an empty `GeneralList` raise `IndexError`.

## Command-line tools

`structlab-stack` reads stack commands from standard input. The first token is
the number of commands, followed by `push x`, `pop`, `empty` or `query`. It
prints `YES`/`NO` for `empty` and the top value for `query`. With `--array` it
uses a fixed-capacity stack (`--capacity`, default 1000). If a command fails on
an empty or full stack, it writes an error to standard error and exits with
status 1.

```
printf '5\npush 3\npush 7\nquery\npop\nempty\n' | structlab-stack
```

`structlab-josephus` plays out the Josephus ring. It takes the number of
people and the count at which a person leaves, with defaults of 10 and 4. It
prints the ring after each removal and then the survivor:

```
structlab-josephus 10 4
```

## Limitations

`BTree` supports insertion and membership tests only. It has no deletion.
The other structures are available only as library code and have no
command-line front end.