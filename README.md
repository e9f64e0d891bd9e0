# algobasics

Small implementations of the exercises that usually come up when learning
data structures and algorithms. They cover string manipulation,
open-addressing hash tables, stacks and queues, expression conversion, graph
traversal, shortest paths, grid searches, graph colouring, recursion classics,
convex hulls and a small `cd`/`pwd` simulator.

The package is pure Python and has no third-party dependencies.

## Modules

| Module                   | What it offers |
|--------------------------|----------------|
| `algobasics.textops`     | `substring`, `find_index`, `insert_substring`, `delete_substring`, `replace_first`, `is_palindrome`, `is_letter_palindrome`, `remove_adjacent_duplicates`, `reverse_words`, `reverse_string`, `remove_duplicate_letters` |
| `algobasics.hashing`     | `HashTable` with `Probing.LINEAR`, `Probing.QUADRATIC` or `Probing.DOUBLE`, and `TableFullError` |
| `algobasics.containers`  | `BoundedStack`, `TwoStackQueue`, `QueueStack`, `run_queue_commands`, `reverse_queue`, `next_greater`, `is_stack_permutation` |
| `algobasics.expressions` | `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `evaluate_prefix`, `letters_to_postfix`, `letters_to_prefix`, `evaluate_rpn`, `is_balanced` |
| `algobasics.traversal`   | `bfs`, `dfs_recursive`, `dfs_stack`, `dfs_iterative`, `shortest_path_lengths`, `topological_sort`, `all_topological_sorts`, `is_bipartite` |
| `algobasics.graphio`     | `adjacency_matrix`, `adjacency_list`, `format_adjacency`, `read_graph`, `read_weighted_graph`, `format_weighted` |
| `algobasics.shortest`    | `dijkstra` (min-heap) and `dijkstra_set` (one pending entry per node); unreachable nodes get `INFINITY` |
| `algobasics.grids`       | `shortest_path_binary_matrix`, `nearest_zero_distances`, `minutes_to_rot` |
| `algobasics.properties`  | `is_k5`, `is_k33`, `is_planar`, `minimum_colouring`, `chromatic_number` |
| `algobasics.recursion`   | `fibonacci`, `fibonacci_series`, `josephus`, `josephus_every_second`, `josephus_binary`, `to_four_bits`, `from_binary`, `max_regions`, `hanoi_move_count`, `hanoi_moves`, `is_palindrome_sequence`, `collatz`, `subsets`, `even_index_values` |
| `algobasics.hull`        | `Point`, `orientation`, `graham_scan`, `convex_hull` |
| `algobasics.pathnav`     | `change_directory`, `working_directory`, `run_commands` |

## A quick tour

```python
from algobasics.textops import find_index, remove_duplicate_letters
from algobasics.expressions import infix_to_postfix, evaluate_postfix, is_balanced
from algobasics.recursion import hanoi_move_count

find_index("TO BE OR NOT TO BE", "BE")   # 3
remove_duplicate_letters("cbacdcbc")     # "acdb"

infix_to_postfix("a+b*c")                # "abc*+"
evaluate_postfix("23*4+")                # 10
is_balanced("{[()]}")                    # True

hanoi_move_count(3)                      # 7
```

Graph functions take adjacency lists written as lists of neighbour lists:

```python
from algobasics.traversal import bfs, is_bipartite

adjacency = [[1, 2], [0, 2, 3], [0, 4], [1, 4], [2, 3]]
bfs(adjacency, 0)                          # [0, 1, 2, 3, 4]
is_bipartite([[1], [0, 2], [1, 3], [2]])   # True
```

A hash table reports the slot each key lands in and can render itself:

```python
from algobasics.hashing import HashTable, Probing

table = HashTable(Probing.LINEAR, 10)
table.insert(12)    # 2
table.insert(2)     # 3
print(table.render())
```

Operations that cannot proceed raise exceptions rather than returning
sentinel values: inserting into a hash table whose probe sequence finds no
free slot raises `algobasics.hashing.TableFullError`, popping an empty
`BoundedStack` raises `IndexError`, pushing onto a full one raises
`OverflowError`, and `topological_sort` raises `ValueError` for a graph with
a cycle.

## What the package does not do

It is a library only: there are no command-line programs and nothing reads
from standard input. Where an exercise would normally be driven by typed
input, the corresponding function takes the values as arguments (for
example `run_queue_commands` and `pathnav.run_commands`) and returns what
would have been printed. The only file input is `graphio.read_graph` and
`graphio.read_weighted_graph`, which read a graph from a path you give.

## Running the tests

Install the `test` extra and run `pytest` from the project root.