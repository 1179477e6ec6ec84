#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by md2deck parsers, renderers and the CLI."""
