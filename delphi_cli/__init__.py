"""Delphi: resolve Elm identifiers against installed package documentation."""

__version__ = "0.3.0"
