# edastructs

A small collection of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `edastructs.bintree` | Immutable binary trees with shared nodes (`BinTree`), the four traversals (`preorder`, `inorder`, `postorder`, `levelorder`), in-order iteration, and `read_tree` for pre-order token streams. |
| `edastructs.balance` | Tree height, height-balance and AVL checks (`height`, `is_balanced`, `avl_height`, `is_avl`), the case solvers `solve_balanced` and `solve_avl`, and the `edastructs-balance` command. |
| `edastructs.treemap` | An ordered map backed by an AVL tree (`TreeMap`): `insert`, item access, `ensure`, `erase`, in-order iteration, `items_from`, `keys_in_range`, `height` and `pretty`. |
| `edastructs.order_stats` | The k-th smallest key of a `TreeMap` (`kth_key`, `kth_keys`); out-of-range positions give `None`. |
| `edastructs.priority_queue` | A binary-heap `PriorityQueue` with a custom "comes before" ordering (min-queue by default). |
| `edastructs.index_pq` | An indexed priority queue (`IndexPQ`, returning `Pair` records) whose priorities can be updated. |
| `edastructs.matrix` | A simple two-dimensional `Matrix` with unchecked row access and checked `at`/`set`. |
| `edastructs.cuts` | Cheapest cost of cutting a board at given points (`min_cut_cost`, `solve`) and the `edastructs-cuts` command. |
| `edastructs.graph` | Undirected graphs (`Graph`) with `DepthFirstSearch`, `DepthFirstPaths` and `BreadthFirstPaths`. |
| `edastructs.digraph` | Directed graphs (`Digraph`) with `DepthFirstDirectedPaths`, multi-source `BreadthFirstDirectedPaths`, `DepthFirstOrder`, `DirectedCycle`, `Topological` and `KosarajuSharirSCC`. |
| `edastructs.weighted_graph` | Undirected weighted graphs (`Edge`, `WeightedGraph`). |
| `edastructs.disjoint_sets` | Union-find with union by size and path compression (`DisjointSets`). |
| `edastructs.black_sheep` | Counting white sheep in a picture of `.` and `X` characters (`count_white_sheep`). |
| `edastructs.school_route` | Counting the cheapest routes from vertex 0 to the last vertex (`SchoolRoute`). |

## Installation

```
pip install .
```

## Examples

Binary trees and balance checks:

```python
from edastructs.bintree import BinTree
from edastructs.balance import height, is_balanced

tree = BinTree(BinTree.leaf("b"), "a", BinTree.leaf("c"))
print(tree.preorder())      # ['a', 'b', 'c']
print(tree.inorder())       # ['b', 'a', 'c']
print(height(tree))         # 2
print(is_balanced(tree))    # True
```

An ordered map:

```python
from edastructs.treemap import TreeMap

m = TreeMap()
for key in (5, 1, 9, 3):
    m[key] = key * 10
print(3 in m, len(m))           # True 4
print(list(m))                  # [1, 3, 5, 9]
print(m.keys_in_range(2, 6))    # [3, 5]
```

A priority queue:

```python
from edastructs.priority_queue import PriorityQueue

pq = PriorityQueue([7, 2, 9])
pq.push(1)
print(pq.top())   # 1
print(pq.pop())   # 1
print(len(pq))    # 3
```

Graph search:

```python
from edastructs.graph import Graph, BreadthFirstPaths

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
paths = BreadthFirstPaths(g, 0)
print(paths.has_path_to(3))   # False
print(paths.distance(2))      # 2
print(paths.path_to(2))       # [0, 1, 2]
```

Union-find:

```python
from edastructs.disjoint_sets import DisjointSets

sets = DisjointSets(5)
sets.union(0, 1)
sets.union(1, 2)
print(sets.connected(0, 2), sets.size(0))   # True 3
```

## Command-line tools

Two commands read their cases from a file named on the command line, or from
standard input when no file is given, and print one answer per case.

```
edastructs-balance balanced cases.txt
edastructs-balance avl < cases.txt
edastructs-cuts cases.txt
```

`edastructs-balance` takes the problem as its first argument:

- `balanced`: the input is the number of cases followed by character trees in
  pre-order, `.` marking an empty subtree. Each answer is `SI` when the heights
  of the two subtrees differ by at most one at every node, `NO` otherwise.
- `avl`: the input is the number of cases followed by integer trees in
  pre-order, `-1` marking an empty subtree. Each answer is `SI` when the tree
  is balanced and a search tree with keys strictly between -1 and 1000000000,
  `NO` otherwise.

`edastructs-cuts` reads cases of the form `L N c1 ... cN` until a case in
which `L` or `N` is zero, and prints the cost computed by `min_cut_cost` for
each.

## Running the tests

```
pip install .[test]
pytest
```