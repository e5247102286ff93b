"""
Protocol-based interfaces for schemacache components.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.interfaces.store import StoreProtocol

__all__ = [
    "StoreProtocol",
]
