"""
Structured logging for Hedera Tools.

Use get_logger() in every module for JSON, aggregation-friendly output.
"""

from hedera_tools.hedera_logging.logger import get_logger

__all__ = ["get_logger"]
