"""Calendar types, sorted list and search tree, interval schedules, and operation-counting exercises."""

__version__ = "0.1.0"