# structkit

Classic data structures and the algorithms that go with them, in plain
Python with no third-party dependencies.

## Installation

```
pip install structkit
```

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.linked_list` | `LinkedList`: singly linked list with insertion, deletion, search, sort, reverse and duplicate removal |
| `structkit.circular_linked_list` | `CircularLinkedList`: the same operations on a circular singly linked list |
| `structkit.circular_doubly_linked_list` | `CircularDoublyLinkedList`: a circular doubly linked list with insertion, deletion and `format()` |
| `structkit.list_algorithms` | `split_at_midpoint`, `add_polynomials`, `josephus` |
| `structkit.queues` | `ArrayQueue` and `ArrayPriorityQueue` (15 slots, not reused once dequeued), `LinkedPriorityQueue` (unbounded), `TwoStackQueue` |
| `structkit.heap` | `MaxPriorityQueue` (at most 49 values), `build_heap`, `heap_sort` |
| `structkit.bst` | `BinarySearchTree` with iterative and recursive insertion, traversals, membership, min/max and deletion |
| `structkit.threaded` | `ThreadedTree`: a right-threaded binary search tree walked inorder without a stack |
| `structkit.binary_tree` | `TreeNode`, `tree_from_level_order`, `count_leaves`, `lowest_common_ancestor`, `height`, `diameter` |
| `structkit.expression_tree` | `build_expression_tree`, `evaluate_tree`, `evaluate_postfix_tree` for single-digit postfix expressions |
| `structkit.trie` | `Trie` of lower-case words with prefix and length queries and deletion |
| `structkit.graph_list` | `AdjacencyListGraph` with degrees, BFS, DFS and a text listing |
| `structkit.graph_matrix` | adjacency-matrix functions: `bfs`, `all_paths`, `find_path`, `has_cycle`, `connected_components`, `is_weakly_connected`, `in_degree`, `out_degree`, `format_matrix` |

Errors are raised the usual Python way: `IndexError` for an empty container
or a bad position, `KeyError` for a missing key, `OverflowError` when a
bounded queue is full, `ValueError` for malformed input.

## Examples

```python
from structkit.linked_list import LinkedList

items = LinkedList([3, 1, 2, 3])
items.remove_duplicates()
print(list(items))          # [3, 1, 2]
items.sort()
print(list(items))          # [1, 2, 3]
```

```python
from structkit.heap import heap_sort
from structkit.trie import Trie

print(heap_sort([5, 2, 9, 1]))            # [1, 2, 5, 9]

words = Trie()
for word in ("car", "cart", "dog"):
    words.insert(word)
print(words.words_with_prefix("car"))     # ['car', 'cart']
print("dog" in words)                     # True
```

```python
from structkit.expression_tree import evaluate_postfix_tree
from structkit.queues import TwoStackQueue

print(evaluate_postfix_tree("23*4+"))     # 10

queue = TwoStackQueue()
for value in (1, 2, 3):
    queue.enqueue(value)
print(queue.dequeue())                    # 1
```

```python
from structkit.graph_matrix import bfs, connected_components

matrix = [
    [0, 1, 0],
    [1, 0, 0],
    [0, 0, 0],
]
print(bfs(matrix, 0))                     # [0, 1]
print(connected_components(matrix))       # (2, [1, 1, 2])
```

## What it does not do

structkit is a library only: it has no command-line program or interactive
menu. It offers no stack type, no double-ended queue, no doubly linked
(non-circular) list, and no evaluation of postfix or prefix strings or
infix conversion outside the expression tree shown above.

## Running the tests

```
pip install "structkit[test]"
pytest
```