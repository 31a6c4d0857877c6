"""Tests for Linear URL helpers."""

import pytest

from linear_relay.linear.identifiers import parse_identifier, team_url


def test_parse_identifier_issue_url():
    """Identifier is the sixth path segment of an issue URL."""
    assert parse_identifier("https://linear.app/acme/issue/ENG-123/fix-login") == "ENG-123"


def test_parse_identifier_strips_fragment():
    """Fragment markers are stripped from the identifier segment."""
    assert parse_identifier("https://linear.app/acme/issue/ENG-123#comment-1") == "ENG-123"


def test_parse_identifier_comment_url():
    """Comment URLs carry the fragment after the slug; the identifier is unaffected."""
    url = "https://linear.app/acme/issue/ENG-123/fix-login#comment-9f2c1a"
    assert parse_identifier(url) == "ENG-123"


def test_parse_identifier_too_short():
    """URLs without a sixth segment raise ValueError."""
    with pytest.raises(ValueError):
        parse_identifier("https://linear.app/acme")


def test_team_url():
    assert team_url("ENG") == "https://linear.app/team/ENG"
