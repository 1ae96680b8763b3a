"""Credential resolution services."""
