"""
Tests for network profile selection (ledger.network.resolve_network).
"""

from __future__ import annotations

import pytest

from hedera_tools.ledger.network import LedgerNetwork, UnknownNetworkError, resolve_network


def test_mainnet_and_testnet():
    assert resolve_network("mainnet") is LedgerNetwork.MAINNET
    assert resolve_network("testnet") is LedgerNetwork.TESTNET


@pytest.mark.parametrize("name", ["foo", "Mainnet", "MAINNET", "mainnet ", "previewnet", ""])
def test_unrecognised_falls_back_to_testnet(name):
    """Only the exact string 'mainnet' selects mainnet; anything else is testnet."""
    assert resolve_network(name) is LedgerNetwork.TESTNET


def test_strict_mode_rejects_unknown():
    with pytest.raises(UnknownNetworkError) as exc_info:
        resolve_network("foo", strict=True)
    assert exc_info.value.name == "foo"
    assert isinstance(exc_info.value, ValueError)


def test_strict_mode_accepts_known():
    assert resolve_network("mainnet", strict=True) is LedgerNetwork.MAINNET
    assert resolve_network("testnet", strict=True) is LedgerNetwork.TESTNET
