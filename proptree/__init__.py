"""Ordered property trees with dotted paths, JSON and XML readers and an INFO writer."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "path",
    "tree",
    "json_reader",
    "info_writer",
    "xml_utils",
    "xml_reader",
]