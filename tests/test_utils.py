# Tests for twitch_oauth/utils.py

import datetime

from twitch_oauth.utils import compute_expiry, join_scopes, mask_token, parse_scopes


class TestParseScopes:
    def test_empty_string_is_empty_set(self):
        assert parse_scopes("") == ()

    def test_none_is_empty_set(self):
        assert parse_scopes(None) == ()

    def test_space_delimited_keeps_order(self):
        assert parse_scopes("a b c") == ("a", "b", "c")

    def test_list_input(self):
        assert parse_scopes(["x", "y"]) == ("x", "y")

    def test_duplicates_dropped_first_wins(self):
        assert parse_scopes("b a b c a") == ("b", "a", "c")

    def test_extra_whitespace_ignored(self):
        assert parse_scopes("  a   b ") == ("a", "b")


class TestJoinScopes:
    def test_empty(self):
        assert join_scopes([]) == ""
        assert join_scopes(None) == ""

    def test_join_split_is_lossless(self):
        scopes = ("channel:read:subscriptions", "user:read:email", "bits:read")
        assert parse_scopes(join_scopes(scopes)) == scopes


def test_compute_expiry_adds_lifetime():
    issued_at = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    assert compute_expiry(3600, issued_at) == datetime.datetime(2024, 1, 1, 1, tzinfo=datetime.timezone.utc)


def test_compute_expiry_defaults_to_now():
    before = datetime.datetime.now(datetime.timezone.utc)
    expiry = compute_expiry(60)
    assert expiry.tzinfo is not None
    assert abs((expiry - before).total_seconds() - 60) <= 2


class TestMaskToken:
    def test_long_token_shows_ends_only(self):
        masked = mask_token("abcdefghijklmnopqrstuvwxyz")
        assert masked == "abcd...wxyz"
        assert "mnop" not in masked

    def test_short_token_fully_masked(self):
        assert mask_token("abc") == "***"

    def test_missing_token(self):
        assert mask_token(None) == "<none>"
        assert mask_token("") == "<none>"
