"""Pydantic models for OAuth client credentials."""
