"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "btree",
    "double_linked_list",
    "expression",
    "general_list",
    "hashing",
    "josephus",
    "linked_list",
    "polynomial",
    "queues",
    "stacks",
    "string_match",
]