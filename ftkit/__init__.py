"""String, memory, linked-list and line-reading helpers, plus ray-tracer scene data types."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "compare",
    "strings",
    "memory",
    "output",
    "linked_list",
    "line_reader",
    "scene",
]