"""Classic data structures and algorithms: linked lists, stacks, queues, binary trees, graphs, expressions and text patterns."""

__version__ = "0.1.0"