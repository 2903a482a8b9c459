# dsalgos

A small library of classic data structures and algorithms in plain Python, with
no third-party dependencies. Containers behave like ordinary Python collections
(`len()`, iteration) and report misuse by raising exceptions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgos.graphs` | `adjacency_list`, `adjacency_matrix` and their text renderings `format_adjacency_list`, `format_adjacency_matrix`; `bellman_ford`, `dijkstra`, `floyd_warshall`, `format_distance_matrix`; `shortest_tour` (brute-force travelling-salesman cost) |
| `dsalgos.puzzle` | `inversion_count`, `blank_row_from_bottom`, `is_solvable` for square sliding-tile puzzles with `0` as the blank |
| `dsalgos.patterns` | star and number patterns returned as newline-terminated strings: `concentric_square`, `hollow_rectangle`, `right_aligned_triangle`, `butterfly`, `star_triangle`, `reverse_star_triangle`, `pyramid`, `centered_pyramid` |
| `dsalgos.arrays` | `reverse_in_place`, `binary_search`, `bubble_sort`, `transpose` |
| `dsalgos.htmltext` | `strip_tags` |
| `dsalgos.drivers` | `DriverRecord`, `parse_driver`, `format_driver` |
| `dsalgos.expressions` | `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `evaluate_prefix`, `operator_priority`, `ExpressionError` |
| `dsalgos.stacks` | `BoundedStack`, `LinkedStack`, `StackFullError`, `StackEmptyError` |
| `dsalgos.queues` | `BoundedQueue`, `LinkedQueue`, `CircularQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsalgos.singly` | `SinglyLinkedList` |
| `dsalgos.doubly` | `DoublyLinkedList`, `CircularDoublyLinkedList` |
| `dsalgos.circular` | `CircularLinkedList` |
| `dsalgos.binarytree` | `TreeNode`, `build_from_preorder`, `preorder`, `inorder`, `postorder`, `levelorder` |

## Examples

### Shortest paths

```python
from dsalgos.graphs import bellman_ford, dijkstra

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
bellman_ford(3, edges, 0)        # [0, 3, 1]

matrix = [
    [0, 4, 0, 8, 0],
    [4, 0, 8, 11, 0],
    [0, 8, 0, 4, 2],
    [0, 7, 14, 0, 0],
    [0, 0, 9, 0, 10],
]
dijkstra(matrix, 0)              # [0, 4, 12, 8, 14]
```

In `dijkstra` a weight of `0` means "no edge" and unreachable vertices are
reported as `graphs.INT_MAX`. `bellman_ford` and `floyd_warshall` use
`graphs.INF` (10**9) for "no path"; `format_distance_matrix` prints it as `I`.
Vertex numbers outside the graph and non-square matrices raise `ValueError`.

### Expressions

Operands are single letters or digits.

```python
from dsalgos.expressions import infix_to_postfix, evaluate_postfix

infix_to_postfix("a+b*c")        # "abc*+"
evaluate_postfix("23*4+")        # 10.0
```

`evaluate_postfix` works in floating point; `evaluate_prefix` works in integers,
with division truncating towards zero. Unknown characters, unbalanced
parentheses, missing operands and division by zero raise `ExpressionError`.

### Containers

```python
from dsalgos.stacks import BoundedStack

stack = BoundedStack(3)
stack.push(1)
stack.push(2)
stack.pop()                      # 2
len(stack)                       # 1
list(stack)                      # [1], iterated from top to bottom
```

Empty or full containers raise `StackEmptyError`, `StackFullError`,
`QueueEmptyError` or `QueueFullError`. `BoundedQueue` does not reuse slots
until it has been emptied completely, so it can report full while holding
fewer than `capacity` values. The linked lists raise `IndexError` when popping
from an empty list or using an invalid position, and `ValueError` when a
value to search for is missing.

### Binary trees

Trees are built from a preorder sequence in which `-1` marks a missing child.
Each traversal returns a list.

```python
from dsalgos.binarytree import build_from_preorder, inorder, levelorder

root = build_from_preorder([1, 2, -1, -1, 3, -1, -1])
inorder(root)                    # [2, 1, 3]
levelorder(root)                 # [1, 2, 3]
```

## What this package does not do

It is a library only: there is no command-line program and no interactive
menu. Input is passed to the functions and classes directly, and results come
back as Python values or strings for the caller to print.