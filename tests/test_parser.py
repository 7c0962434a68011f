"""Tests for parse_message."""

from datetime import datetime, timezone

import pytest

from siwe_message import ParsedMessage, create_message, parse_message

ADDRESS = "0xA0Cf798816D4b9b9866b5330EEa46a18382f251e"

DEFAULT = (
    "example.com wants you to sign in with your Ethereum account:\n"
    "0xA0Cf798816D4b9b9866b5330EEa46a18382f251e\n"
    "\n"
    "URI: https://example.com/path\n"
    "Version: 1\n"
    "Chain ID: 1\n"
    "Nonce: foobarbaz\n"
    "Issued At: 2023-01-01T00:00:00.000Z"
)


def test_default():
    parsed = parse_message(DEFAULT)
    assert parsed.fields() == {
        "address": ADDRESS,
        "domain": "example.com",
        "uri": "https://example.com/path",
        "version": "1",
        "chain_id": 1,
        "nonce": "foobarbaz",
        "issued_at": datetime(2023, 1, 1, tzinfo=timezone.utc),
    }
    assert parsed.scheme is None
    assert parsed.statement is None
    assert parsed.resources is None


def test_garbage_yields_nothing():
    assert parse_message("garbage text").fields() == {}
    assert parse_message("").fields() == {}


def test_scheme():
    parsed = parse_message("https://" + DEFAULT)
    assert parsed.scheme == "https"
    assert parsed.domain == "example.com"
    assert parsed.address == ADDRESS


def test_statement():
    text = DEFAULT.replace("\n\nURI:", "\n\nI accept the Terms of Service\n\nURI:")
    parsed = parse_message(text)
    assert parsed.statement == "I accept the Terms of Service"
    assert parsed.uri == "https://example.com/path"


def test_empty_statement_is_present():
    text = DEFAULT.replace("\n\nURI:", "\n\n\n\nURI:")
    assert parse_message(text).statement == ""


def test_optional_trailers():
    text = DEFAULT + (
        "\nExpiration Time: 2022-02-04T00:00:00.000Z"
        "\nNot Before: 2022-02-04T01:00:00.000Z"
        "\nRequest ID: 123e4567-e89b-12d3-a456-426614174000"
    )
    parsed = parse_message(text)
    assert parsed.expiration_time == datetime(2022, 2, 4, tzinfo=timezone.utc)
    assert parsed.not_before == datetime(2022, 2, 4, 1, tzinfo=timezone.utc)
    assert parsed.request_id == "123e4567-e89b-12d3-a456-426614174000"


def test_trailers_may_be_skipped():
    parsed = parse_message(DEFAULT + "\nRequest ID: abc")
    assert parsed.request_id == "abc"
    assert parsed.expiration_time is None
    assert parsed.not_before is None


def test_trailers_out_of_order_are_ignored():
    parsed = parse_message(DEFAULT + "\nRequest ID: abc\nNot Before: 2022-02-04T01:00:00.000Z")
    assert parsed.request_id == "abc"
    assert parsed.not_before is None


def test_resources():
    parsed = parse_message(DEFAULT + "\nResources:\n- https://example.com/a\n- https://example.com/b")
    assert parsed.resources == ("https://example.com/a", "https://example.com/b")


def test_resources_stop_at_first_other_line():
    parsed = parse_message(DEFAULT + "\nResources:\n- https://example.com/a\ntrailing\n- https://example.com/b")
    assert parsed.resources == ("https://example.com/a",)


def test_resources_marker_without_entries():
    assert parse_message(DEFAULT + "\nResources:").resources == ()


def test_oversized_chain_id_is_dropped():
    parsed = parse_message(DEFAULT.replace("Chain ID: 1", "Chain ID: " + "1" * 5000))
    assert parsed.chain_id is None
    assert parsed.nonce == "foobarbaz"
    assert parsed.uri == "https://example.com/path"


@pytest.mark.parametrize("text", [
    "1" * 100_000,
    DEFAULT.replace("Chain ID: 1", "Chain ID: " + "9" * 20_000),
    DEFAULT.replace("\n", "\r\n"),
    DEFAULT.replace("2023-01-01T00:00:00.000Z", "x" * 10_000),
    "Resources:",
    "Resources:\n- ",
    "\n" * 1000,
    "URI: \nVersion: \nChain ID: \nNonce: \nIssued At: ",
    "https:// wants you to sign in with your Ethereum account:\n",
    "\x00\ufeff " * 100,
], ids=[
    "digits", "huge-chain-id", "crlf", "long-timestamp", "lone-marker",
    "marker-empty-entry", "blank-lines", "empty-labels", "empty-domain", "control-chars",
])
def test_never_raises(text):
    assert isinstance(parse_message(text), ParsedMessage)


def test_resources_marker_must_be_its_own_line():
    parsed = parse_message(DEFAULT + "\nResources: inline\n- https://example.com/a")
    assert parsed.resources is None


def test_unparsable_timestamp_is_dropped():
    parsed = parse_message(DEFAULT.replace("2023-01-01T00:00:00.000Z", "yesterday"))
    assert parsed.issued_at is None
    assert parsed.nonce == "foobarbaz"


def test_suffix_without_prefix():
    parsed = parse_message(DEFAULT.split("\n\n", 1)[1])
    assert parsed.domain is None
    assert parsed.address is None
    assert parsed.chain_id == 1


def test_prefix_without_suffix():
    parsed = parse_message(DEFAULT.split("URI:")[0])
    assert parsed.domain == "example.com"
    assert parsed.address == ADDRESS
    assert parsed.uri is None
    assert parsed.issued_at is None


@pytest.mark.parametrize("broken", [
    DEFAULT.replace("Chain ID: 1", "Chain ID: one"),
    DEFAULT.replace("Nonce: foobarbaz", "Nonce: foo-bar-baz"),
    DEFAULT.replace("Version: 1\n", ""),
])
def test_broken_suffix_is_all_or_nothing(broken):
    parsed = parse_message(broken)
    assert parsed.uri is None
    assert parsed.chain_id is None
    assert parsed.nonce is None
    assert parsed.address == ADDRESS


def test_domain_and_address_travel_together():
    parsed = parse_message(DEFAULT.replace(ADDRESS, "0x123"))
    assert parsed.domain is None
    assert parsed.address is None


class TestRoundTrip:
    def test_fully_populated(self, full_message):
        parsed = parse_message(create_message(full_message))
        expected = {**full_message, "resources": tuple(full_message["resources"])}
        assert parsed.fields() == expected

    def test_minimal(self, base_message):
        parsed = parse_message(create_message(base_message))
        assert parsed.fields() == base_message

    def test_resources(self, base_message):
        base_message["resources"] = ["https://example.com/a", "https://example.com/b"]
        parsed = parse_message(create_message(base_message))
        assert parsed.resources == ("https://example.com/a", "https://example.com/b")

    def test_statement_mentioning_resources(self, base_message):
        base_message["statement"] = "Grants access to Resources: listed below"
        base_message["resources"] = ["https://example.com/a"]
        parsed = parse_message(create_message(base_message))
        assert parsed.statement == "Grants access to Resources: listed below"
        assert parsed.resources == ("https://example.com/a",)

    def test_request_id_mentioning_resources(self, base_message):
        base_message["request_id"] = "Resources:x"
        base_message["resources"] = ["https://example.com/a"]
        parsed = parse_message(create_message(base_message))
        assert parsed.request_id == "Resources:x"
        assert parsed.resources == ("https://example.com/a",)

    def test_statement_that_is_only_the_marker(self, base_message):
        base_message["statement"] = "Resources:"
        parsed = parse_message(create_message(base_message))
        assert parsed.statement == "Resources:"
        assert parsed.resources is None

    def test_scheme(self, base_message):
        base_message["scheme"] = "https"
        parsed = parse_message(create_message(base_message))
        assert parsed.scheme == "https"
        assert parsed.domain == "example.com"
