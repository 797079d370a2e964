"""Core helpers for netpath."""
