"""
Tests for hedera_logging: processor chain output and key redaction.
"""

from __future__ import annotations

import json

import pytest

from hedera_tools.hedera_logging import get_logger
from hedera_tools.hedera_logging.logger import (
    REDACTED,
    _add_timestamp,
    _normalize_event,
    build_processors,
    redact_secrets,
)

KEY = "302e020100300506032b657004220420" + "44" * 32


def _render(**event_dict) -> dict:
    """Run an event through the JSON processor chain and parse the output line."""
    out = dict(event_dict)
    for processor in build_processors("json"):
        out = processor(None, "info", out)
    return json.loads(out)


def test_get_logger_binds_name():
    logger = get_logger("hedera_tools.test")
    logger.info("test_message", key="value")


def test_event_renamed_to_event_type():
    event = _normalize_event(None, "info", {"event": "mint_token_succeeded", "token_id": "0.0.2002"})
    assert event["event_type"] == "mint_token_succeeded"
    assert event["message"] == "mint_token_succeeded"
    assert "event" not in event
    assert "timestamp" in _add_timestamp(None, "info", {})


@pytest.mark.parametrize(
    "field",
    [
        "userPrivateKey",
        "user_private_key",
        "supplyKey",
        "supply_key",
        "adminKey",
        "admin_key",
        "associateKey",
        "associate_key",
        "dissociateKey",
        "dissociate_key",
        "newKey",
        "new_key",
        "private_key",
    ],
)
def test_key_fields_rendered_masked(field):
    line = _render(event="mint_token_requested", token_id="0.0.2002", **{field: KEY})
    assert line[field] == REDACTED
    assert line["token_id"] == "0.0.2002"
    assert line["event_type"] == "mint_token_requested"
    assert KEY not in json.dumps(line)


def test_nested_body_masked():
    body = {"network": "testnet", "userPrivateKey": KEY, "keys": [{"supplyKey": KEY}]}
    line = _render(event="request_body", body=body)
    assert line["body"]["network"] == "testnet"
    assert line["body"]["userPrivateKey"] == REDACTED
    assert line["body"]["keys"][0]["supplyKey"] == REDACTED


def test_empty_key_left_as_is():
    event = redact_secrets(None, "info", {"supply_key": None, "account_id": "0.0.1001"})
    assert event == {"supply_key": None, "account_id": "0.0.1001"}
