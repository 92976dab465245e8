"""
Operations and their submission.
"""

from .codec import compact_operation, signing_payload
from .operations import Operation, OperationType, RollBuy, RollSell, Transfer
from .submission import SubmissionClient

__all__ = [
    "Operation",
    "OperationType",
    "RollBuy",
    "RollSell",
    "SubmissionClient",
    "Transfer",
    "compact_operation",
    "signing_payload",
]
