"""
Error recovery components for the Massa SDK.

Provides retry policies for RPC calls in unstable network conditions.
"""

from .retry import ExponentialBackoff, FixedBackoff, RetryPolicy

__all__ = [
    "ExponentialBackoff",
    "FixedBackoff",
    "RetryPolicy",
]
