# algokit

A collection of classic algorithms and data structures in plain Python, with
no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.searching` | `binary_search`, `lower_bound`, `upper_bound`, `frequency`, `linear_search` |
| `algokit.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bit_range`, `count_set_bits`, `count_set_bits_fast` |
| `algokit.number_theory` | Euclid's `gcd`, `prime_sum` (a split of a number into two primes) |
| `algokit.dynamic` | `knapsack_01`, `subset_sum`, `can_partition_equally`, `longest_common_subsequence`, `min_insertions_for_palindrome`, `trapped_water`, `travelling_salesman` |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `counting_sort`, `merge_sort`, `quick_sort_lomuto`, `quick_sort_hoare`, `sort_012`, `count_inversions` |
| `algokit.heaps` | `MaxHeap`, `sift_down`, `build_max_heap`, `heap_sort`, `k_largest` |
| `algokit.backtracking` | `hamiltonian_cycles`, `n_queens`, `rat_in_maze`, `tower_of_hanoi` |
| `algokit.greedy` | `max_activities`, `fractional_knapsack`, `job_sequencing`, `optimal_merge_cost` |
| `algokit.stacks` | `BoundedStack`, `precedence`, `infix_to_postfix`, `has_redundant_parentheses`, `reverse_queue`, `reverse_queue_recursive`, `reverse_string`, `sort_strings` |
| `algokit.graph` | `Graph` with `bfs` and `dfs`, `WeightedGraph`, `articulation_points`, `greedy_coloring`, `is_bipartite` |
| `algokit.mst` | `Edge`, `kruskal`, `kruskal_weight`, `prim_matrix`, `prim_weight` |
| `algokit.generic_tree` | n-ary `TreeNode`, `build_tree`, `describe`, `diameter`, `node_to_root_path`, `distance_between` |
| `algokit.dsu` | `UnionFind` with path compression and union by rank |
| `algokit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `algokit.flow` | `ford_fulkerson` returning a `FlowResult` with the flow and its augmenting paths |
| `algokit.linked_list` | `LinkedList` with 1-based `insert` and `delete`, `reverse`, `is_palindrome`, `middle`; `segregate_even_odd` |
| `algokit.avl` | self-balancing `AVLTree` with `insert`, `delete`, `in` and `preorder` |
| `algokit.binary_tree` | `Node`, `bst_insert`, `inorder`, `preorder`, `postorder`, `level_order`, `morris_inorder`, `height`, `diameter`, `build_level_order`, `build_preorder`, `largest_bst` |

## Examples

```python
from algokit.sorting import merge_sort
from algokit.stacks import infix_to_postfix
from algokit.bits import count_set_bits
from algokit.backtracking import tower_of_hanoi
from algokit.dsu import UnionFind

merge_sort([5, 4, 3, 6, 1, 2, 7])     # [1, 2, 3, 4, 5, 6, 7]
infix_to_postfix("a^(b*c-d/(e+f))")   # "abc*def+/-^"
count_set_bits(15)                    # 4
tower_of_hanoi(2)                     # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]

sets = UnionFind(5)
sets.union(0, 1)
sets.same_set(0, 1)                   # True
len(sets)                             # 4
```

```python
from algokit.graph import Graph, WeightedGraph
from algokit.shortest_paths import dijkstra

g = Graph()
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.bfs(0)                              # [0, 1, 2, 3]

roads = WeightedGraph()
roads.add_edge(0, 1, 4)
roads.add_edge(1, 2, 1)
roads.add_edge(0, 2, 7)
dijkstra(roads.adjacency(), 0)        # {0: 0, 1: 4, 2: 5}
```

Sorting functions return new lists and leave their input untouched. Operations
that fail in the usual sense raise exceptions: `BoundedStack` raises
`StackOverflow` and `StackUnderflow`, `bellman_ford` raises
`NegativeCycleError` when a negative cycle is reachable, and index-based
functions raise `IndexError` for vertices or positions out of range.

## What the package does not do

algokit is a library only. It has no command-line programs and reads nothing
from standard input: every algorithm is called from Python with its data as
arguments and hands its result back as a value. It also has no helpers for
maximum subarray sums, prefix-sum range queries, matrix trace or Cartesian
products of sets.