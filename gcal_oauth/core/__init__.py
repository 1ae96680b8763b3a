"""Errors, paths and logging helpers."""
