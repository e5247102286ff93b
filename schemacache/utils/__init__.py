"""
Utility modules for schemacache.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.utils.logging import get_logger

__all__ = ["get_logger"]
