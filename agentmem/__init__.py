"""Validated keys, namespaces, an in-memory map and project configuration for agent memory."""

__version__ = "0.1.1"