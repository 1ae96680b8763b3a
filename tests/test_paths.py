"""Tests for keys file location and the remediation hint."""

from pathlib import Path

from gcal_oauth.core.paths import generate_credentials_error_message, get_keys_file_path


def test_default_path_under_project_root(settings, tmp_path):
    path = get_keys_file_path({}, settings)

    assert path == (tmp_path / "gcp-oauth.keys.json").resolve()


def test_environment_override(settings, tmp_path):
    custom = tmp_path / "nested" / "keys.json"

    assert get_keys_file_path({"GOOGLE_OAUTH_CREDENTIALS": str(custom)}, settings) == custom.resolve()


def test_relative_override_is_made_absolute(settings, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    path = get_keys_file_path({"GOOGLE_OAUTH_CREDENTIALS": "keys.json"}, settings)

    assert path.is_absolute()
    assert path == (tmp_path / "keys.json").resolve()


def test_home_override_is_expanded(settings, tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    path = get_keys_file_path({"GOOGLE_OAUTH_CREDENTIALS": "~/keys.json"}, settings)

    assert path == (tmp_path / "keys.json").resolve()


def test_empty_override_is_ignored(settings, tmp_path):
    path = get_keys_file_path({"GOOGLE_OAUTH_CREDENTIALS": ""}, settings)

    assert path.name == "gcp-oauth.keys.json"


def test_error_message_lists_every_option(settings, tmp_path):
    message = generate_credentials_error_message({}, settings)

    assert "GOOGLE_CLIENT_ID" in message
    assert "GOOGLE_CLIENT_SECRET" in message
    assert "GOOGLE_OAUTH_CREDENTIALS" in message
    assert str((tmp_path / "gcp-oauth.keys.json").resolve()) in message


def test_error_message_uses_given_path(settings):
    message = generate_credentials_error_message({}, settings, keys_path=Path("/etc/oauth/keys.json"))

    assert "/etc/oauth/keys.json" in message


def test_unknown_user_override_kept_as_written(settings, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    path = get_keys_file_path({"GOOGLE_OAUTH_CREDENTIALS": "~nosuchuser_zz/keys.json"}, settings)

    assert path == (tmp_path / "~nosuchuser_zz" / "keys.json").resolve()
