"""Utility functions and helpers."""

from ssmgr_collector.core.utils.log_config import LOG_DIR, setup_logging

__all__ = ["LOG_DIR", "setup_logging"]
