"""Gomoku board model and tiered AI opponent."""

__all__ = [
    "core",
    "ai",
    "app",
]
