"""
Main entrypoint: Hedera Tools API server.

Env: PORT (default 3000), HOST (default 0.0.0.0), SECRET_KEY, STRICT_NETWORK, LOG_LEVEL.
A .env file in the project root is loaded when present.

Equivalent: uvicorn hedera_tools.api_server.app:app --host 0.0.0.0 --port 3000
"""

# Configure structured JSON logging before other imports that may log
from hedera_tools.hedera_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI app under uvicorn on HOST:PORT."""
    from hedera_tools.config import get_settings

    settings = get_settings()

    from hedera_tools.api_server.app import app
    import uvicorn

    logger.info("server_starting", host=settings.host, port=settings.port, url=f"http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
