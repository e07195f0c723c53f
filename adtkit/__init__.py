"""Classic abstract data types: a fixed-capacity set, a stack, a max-heap, a hash dictionary and a BST checker."""

__version__ = "0.1.0"