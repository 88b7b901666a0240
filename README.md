# dsalab

A collection of classic data structures and algorithms. Each one can be used
as a library from Python or run as a small interactive console program that
reads its input from standard input. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is included

| Module | What it does |
| --- | --- |
| `dsalab.heap` | `build_max_heap(values)` returns the values rearranged into max-heap order. |
| `dsalab.book_tree` | `build_book(structure)` builds a `Book` from per-chapter lists of subsection counts (at most 10 at each level); `Book.index_lines()` returns the nested index. |
| `dsalab.bst` | `BinarySearchTree` with `insert`, `longest_path`, `find_min` (raises `ValueError` when empty), `mirror`, `inorder` and `in` for search. |
| `dsalab.expression_tree` | `construct_tree(prefix)` builds an `ExprNode` tree from a prefix expression of single-character operands and `+ - * /`; `postorder(root)` walks it without recursion; `is_operator(ch)`. |
| `dsalab.campus_graph` | `create_graph()` returns a fixed six-landmark `CampusGraph`; `dfs(start)` uses its adjacency matrix, `bfs(start)` its adjacency lists. |
| `dsalab.optimal_bst` | `optimal_bst(probabilities)` returns an `OptimalBST` with its minimum `cost` and a `structure()` description of the tree. |
| `dsalab.student_file` | `StudentRecord` (fixed-size binary `pack`/`unpack`) and `SequentialFile`: `insert`, `delete`, `modify`, `search`, `records`. |
| `dsalab.direct_access` | `DirectAccessFile`: records appended to a file and reached through a ten-slot hash table on roll number (`insert`, `modify`, `search`, `records`). |
| `dsalab.office_network` | `OfficeNetwork` with `add_office`, `index_of`, `add_connection` and `minimum_spanning_tree(start)` (Prim's algorithm), returning `Connection` links. |
| `dsalab.dictionary_avl` | `AVLDictionary`: `insert`, `remove`, `update`, `ascending`, `descending`, `find` (meaning and number of comparisons), `max_comparisons`. |

## Library use

```python
from dsalab.heap import build_max_heap
from dsalab.bst import BinarySearchTree
from dsalab.dictionary_avl import AVLDictionary

print(build_max_heap([10, 40, 30, 50, 20]))

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
print(tree.inorder(), tree.longest_path(), tree.find_min(), 40 in tree)

words = AVLDictionary()
words.insert("apple", "a fruit")
words.insert("brick", "a building block")
print(words.ascending())
print(words.find("brick"))
```

## Command-line programs

Each program prompts for its input on the terminal:

```
dsalab-heap
dsalab-book-tree
dsalab-bst
dsalab-expression-tree
dsalab-campus-graph
dsalab-optimal-bst
dsalab-student-file
dsalab-direct-access
dsalab-office-network
dsalab-dictionary
```

`dsalab-student-file` and `dsalab-direct-access` keep their records in
`StudInfo.txt` in the current directory; pass `--file PATH` to use another
file.

## Limitations

- `DirectAccessFile` empties its file when it is created, and its hash table
  lives only in memory: records from an earlier session are not kept. Each
  slot holds only the latest record whose roll number falls in it.
- `dsalab-heap` accepts at most 29 students, and `optimal_bst` at most 98 keys.
- `OfficeNetwork` holds at most 50 offices with names of up to 19 characters.