"""
Adapters composing a Cache into narrower APIs.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.adapters.session import SessionStore

__all__ = ["SessionStore"]
