"""Classic data structures and algorithms: recursion, searching, sorting, lists, trees, hashing and graphs."""

__version__ = "0.1.0"

__all__ = [
    "recursion",
    "searching",
    "datagen",
    "sorting",
    "sort_cli",
    "linked_list",
    "doubly_linked_list",
    "containers",
    "company_lookup",
    "binary_tree",
    "bst",
    "avl",
    "graph",
]