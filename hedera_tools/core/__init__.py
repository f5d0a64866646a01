"""
Core utilities — shared exceptions used by the ledger layer and the API server.
"""
