"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn hedera_tools.api_server.app:app --host 0.0.0.0 --port 3000
"""

from hedera_tools.api_server.server import app

__all__ = ["app"]
