"""Helpers for screen-edge widgets: colours, drawing, lookups, shell, templates, text and CLI."""

__version__ = "0.1.0"