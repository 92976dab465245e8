"""
Transport layer for the Massa SDK.

Provides the abstract transport and its JSON-RPC over HTTP implementation.
"""

from .http import HttpTransport, Transport

__all__ = ["HttpTransport", "Transport"]
