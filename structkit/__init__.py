"""Classic data structures and algorithms: linked lists, queues, heaps, trees, tries and graphs."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "bst",
    "circular_doubly_linked_list",
    "circular_linked_list",
    "expression_tree",
    "graph_list",
    "graph_matrix",
    "heap",
    "linked_list",
    "list_algorithms",
    "queues",
    "threaded",
    "trie",
]