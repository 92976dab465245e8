"""
Retry policies for node RPC calls.

A policy runs a coroutine function and re-runs it after a delay when it
fails with a retryable error (see ``ErrorHandler.is_retryable``). Any other
error, or the last error once attempts run out, is raised unchanged.
"""

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from ..runtime.errors import ErrorHandler

logger = logging.getLogger(__name__)


class RetryPolicy(ABC):
    """
    Base retry policy.

    Subclasses choose the delay before each retry.
    """

    def __init__(self, max_attempts: int = 3, base_delay: float = 1.0, max_delay: float = 60.0,
                 jitter: bool = True, jitter_factor: float = 0.1):
        """
        Args:
            max_attempts: Attempts in total, the first one included
            base_delay: Delay before the first retry, in seconds
            max_delay: Upper bound of any delay, in seconds
            jitter: Whether to randomize delays
            jitter_factor: Width of the jitter band as a fraction of the delay
        """
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.jitter = jitter
        self.jitter_factor = jitter_factor

    @abstractmethod
    def calculate_delay(self, attempt: int) -> float:
        """Delay in seconds after failed attempt number ``attempt`` (1-based)."""
        pass

    def add_jitter(self, delay: float) -> float:
        if not self.jitter:
            return delay
        return max(0.0, delay + delay * self.jitter_factor * (random.random() - 0.5))

    async def execute(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """
        Await ``func(*args, **kwargs)`` until it succeeds or may not be retried.

        Returns:
            The result of the first successful call

        Raises:
            The error of the last attempt
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                if attempt >= self.max_attempts or not ErrorHandler.is_retryable(e):
                    raise
                delay = self.add_jitter(min(self.calculate_delay(attempt), self.max_delay))
                logger.warning(f"Attempt {attempt} failed: {e}. Retrying in {delay:.2f}s...")
                await asyncio.sleep(delay)
                continue

            if attempt > 1:
                logger.info(f"Operation succeeded on attempt {attempt}")
            return result


class ExponentialBackoff(RetryPolicy):
    """Delay of ``base_delay * factor ** (attempt - 1)``, capped at ``max_delay``."""

    def __init__(self, max_attempts: int = 5, base_delay: float = 1.0, max_delay: float = 60.0,
                 factor: float = 2.0, jitter: bool = True, jitter_factor: float = 0.1):
        super().__init__(max_attempts, base_delay, max_delay, jitter, jitter_factor)
        self.factor = factor

    def calculate_delay(self, attempt: int) -> float:
        return min(self.base_delay * (self.factor ** (attempt - 1)), self.max_delay)


class FixedBackoff(RetryPolicy):
    """Same delay before every retry."""

    def __init__(self, max_attempts: int = 3, delay: float = 1.0, jitter: bool = True,
                 jitter_factor: float = 0.1):
        super().__init__(max_attempts, delay, delay, jitter, jitter_factor)

    def calculate_delay(self, attempt: int) -> float:
        return self.base_delay
