"""Dummy file generator for upload, storage and size-limit testing."""

__version__ = "0.1.0"
