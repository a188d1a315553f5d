"""A linked list, a string-keyed hash map, a string builder, futures, arena buffers and file helpers."""

__version__ = "0.1.0"