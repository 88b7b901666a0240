[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalab"
version = "0.1.0"
description = "Classic data structures and algorithms as small interactive programs and a reusable library"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "heap",
    "binary-search-tree",
    "avl-tree",
    "expression-tree",
    "graph",
    "prim",
    "optimal-bst",
    "file-organisation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalab-heap = "dsalab.heap:main"
dsalab-book-tree = "dsalab.book_tree:main"
dsalab-bst = "dsalab.bst:main"
dsalab-expression-tree = "dsalab.expression_tree:main"
dsalab-campus-graph = "dsalab.campus_graph:main"
dsalab-optimal-bst = "dsalab.optimal_bst:main"
dsalab-student-file = "dsalab.student_file:main"
dsalab-direct-access = "dsalab.direct_access:main"
dsalab-office-network = "dsalab.office_network:main"
dsalab-dictionary = "dsalab.dictionary_avl:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
