"""Retry utilities."""

import time
from typing import Callable, Optional, Tuple, Type, TypeVar

from weatherterm.utils.logger import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


class RetryHandler:
    """Handle retries with exponential backoff.

    With ``max_retries=0`` the function runs exactly once and its error
    propagates unchanged.
    """

    def __init__(
        self,
        max_retries: int = 0,
        initial_delay: float = 1.0,
        backoff_factor: float = 2.0,
        retry_on: Tuple[Type[BaseException], ...] = (Exception,),
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """
        Initialize retry handler.

        Args:
            max_retries: Maximum number of retry attempts after the first one
            initial_delay: Initial delay in seconds
            backoff_factor: Multiplier for delay on each retry
            retry_on: Exception types that trigger a retry
            sleep: Function used to wait between attempts
        """
        self.max_retries = max_retries
        self.initial_delay = initial_delay
        self.backoff_factor = backoff_factor
        self.retry_on = retry_on
        self.sleep = sleep or time.sleep

    def execute(self, func: Callable[..., T], *args, **kwargs) -> T:
        """
        Execute function with retries.

        Args:
            func: Function to execute
            *args: Positional arguments for function
            **kwargs: Keyword arguments for function

        Returns:
            Function result

        Raises:
            Exception: The last error if all attempts fail
        """
        delay = self.initial_delay

        for attempt in range(self.max_retries + 1):
            try:
                return func(*args, **kwargs)
            except self.retry_on as e:
                if attempt >= self.max_retries:
                    if self.max_retries:
                        logger.error(
                            f"All {self.max_retries + 1} attempts failed. "
                            f"Last error ({type(e).__name__}): {e}"
                        )
                    raise

                logger.warning(
                    f"Attempt {attempt + 1}/{self.max_retries + 1} failed "
                    f"({type(e).__name__}): {e}. Retrying in {delay:.2f}s"
                )
                self.sleep(delay)
                delay *= self.backoff_factor
