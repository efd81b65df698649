"""Game-loop helpers."""
