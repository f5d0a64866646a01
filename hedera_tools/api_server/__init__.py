"""
API server package — HTTP/REST interface.

Routes account and token operations to the ledger gateway under /api and
/api/v1, validates request fields, and renders uniform JSON errors.
"""
