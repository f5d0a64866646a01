"""
Hedera Tools — REST API over the Hedera SDK for account and token operations.

Each endpoint validates its body, builds one ledger transaction, executes it
against a per-request client and relays the receipt as JSON. Modular layout:
config, logging, ledger gateway, and API server.
"""

__version__ = "0.1.0"
