"""Data hoarding and indexing framework: site interfaces, HTTP sessions, archives and an index."""

__version__ = "0.1.0"