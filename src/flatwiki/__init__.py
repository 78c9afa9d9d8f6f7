"""Flatwiki - a page-editing service backed by a flat-file store."""

__version__ = "0.1.0"
