"""Tests for token_store module."""

from unittest import mock

import pytest

from DevfileRes import token_store


@pytest.fixture
def keychain():
    """Patch in a working keychain backed by a dict."""
    entries = {}
    fake = mock.MagicMock()
    fake.get_password.side_effect = lambda service, name: entries.get((service, name))
    fake.set_password.side_effect = (
        lambda service, name, value: entries.__setitem__((service, name), value)
    )

    def _delete(service, name):
        if (service, name) not in entries:
            raise RuntimeError("no such entry")
        del entries[(service, name)]

    fake.delete_password.side_effect = _delete
    with mock.patch.object(token_store, "_AVAILABLE", True), \
         mock.patch.dict(token_store.__dict__, {"keyring": fake}):
        yield entries


class TestEntryName:
    def test_raw_github_shares_github_entry(self):
        assert token_store.entry_name("raw.githubusercontent.com") == "token:github.com"
        assert token_store.entry_name("github.com") == "token:github.com"

    def test_other_hosts(self):
        assert token_store.entry_name("gitlab.com") == "token:gitlab.com"
        assert token_store.entry_name("bitbucket.org") == "token:bitbucket.org"


class TestUnavailable:
    def test_all_calls_are_no_ops(self):
        with mock.patch.object(token_store, "_AVAILABLE", False):
            assert token_store.is_available() is False
            assert token_store.load("github.com") is None
            assert token_store.save("github.com", "tok") is False
            assert token_store.delete("github.com") is False


class TestWithKeychain:
    def test_save_then_load_by_host(self, keychain):
        assert token_store.save("gitlab.com", "glpat-1") is True
        assert keychain == {("DevfileRes", "token:gitlab.com"): "glpat-1"}
        assert token_store.load("gitlab.com") == "glpat-1"
        assert token_store.load("bitbucket.org") is None

    def test_raw_host_reads_github_token(self, keychain):
        token_store.save("github.com", "ghp-1")
        assert token_store.load("raw.githubusercontent.com") == "ghp-1"

    def test_empty_token_not_saved(self, keychain):
        assert token_store.save("github.com", "") is False
        assert keychain == {}

    def test_delete(self, keychain):
        token_store.save("bitbucket.org", "bb-1")
        assert token_store.delete("bitbucket.org") is True
        assert token_store.load("bitbucket.org") is None

    def test_delete_missing_entry(self, keychain):
        assert token_store.delete("github.com") is False

    def test_backend_errors_are_swallowed(self):
        fake = mock.MagicMock()
        fake.get_password.side_effect = RuntimeError("locked")
        fake.set_password.side_effect = RuntimeError("locked")
        with mock.patch.object(token_store, "_AVAILABLE", True), \
             mock.patch.dict(token_store.__dict__, {"keyring": fake}):
            assert token_store.load("github.com") is None
            assert token_store.save("github.com", "tok") is False
