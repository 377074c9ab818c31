"""Utilities for anilist-mcp."""
