"""Notion-style SVG cover generator."""

__version__ = "0.1.0"
