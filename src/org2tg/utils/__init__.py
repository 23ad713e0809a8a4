#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the org2tg parser, renderer and CLI."""
