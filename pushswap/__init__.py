"""Sort integers with two stacks and print the operations used, plus small string, byte, list and I/O helpers."""

__version__ = "1.0.0"