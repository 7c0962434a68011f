from datetime import datetime, timezone

import pytest

ADDRESS = "0xA0Cf798816D4b9b9866b5330EEa46a18382f251e"
ISSUED_AT = datetime(2023, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def base_message() -> dict:
    return {
        "address": ADDRESS,
        "chain_id": 1,
        "domain": "example.com",
        "nonce": "foobarbaz",
        "uri": "https://example.com/path",
        "version": "1",
        "issued_at": ISSUED_AT,
    }


@pytest.fixture
def full_message(base_message) -> dict:
    return {
        **base_message,
        "scheme": "https",
        "statement": "I accept the ExampleOrg Terms of Service: https://example.com/tos",
        "expiration_time": datetime(2023, 1, 2, 12, 30, 15, 250000, tzinfo=timezone.utc),
        "not_before": datetime(2022, 12, 31, tzinfo=timezone.utc),
        "request_id": "req-123 abc",
        "resources": ["https://example.com/a", "ipfs://bafybeiemxf5abjwjbikoz4mc3a3dla6ual3jsgpdr4cjr3oz3evfyavhwq/"],
    }
