"""Classic algorithms and data structures: sorting, text, arrays, lists, containers, graphs, records."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "containers",
    "graphs",
    "linked_list",
    "records",
    "sorting",
    "text",
]