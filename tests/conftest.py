"""Shared fixtures: isolated settings, a temporary keys file, fake environments."""

import json

import pytest

from gcal_oauth.config import Settings
from gcal_oauth.services.credentials import CredentialResolver


@pytest.fixture
def settings(tmp_path):
    return Settings(project_root=tmp_path, debug=False, log_level="INFO")


@pytest.fixture
def keys_file(tmp_path):
    """Default keys file location for the `settings` fixture (not created)."""
    return tmp_path / "gcp-oauth.keys.json"


@pytest.fixture
def write_keys(keys_file):
    def _write(document):
        text = document if isinstance(document, str) else json.dumps(document)
        keys_file.write_text(text, encoding="utf-8")
        return keys_file

    return _write


@pytest.fixture
def make_resolver(settings):
    def _make(environ=None, **kwargs):
        return CredentialResolver(
            environ={} if environ is None else environ, settings=settings, **kwargs
        )

    return _make
