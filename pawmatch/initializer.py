"""
Store initialization with bounded retry.

Makes sure the sample catalog has been seeded at least once per process. When
seeding leaves the store empty a single delayed retry is scheduled; inside a
running event loop that retry is an ``asyncio.Task`` the caller can await or
poll through ``pending_retry``, otherwise it runs synchronously after the
delay.
"""

import asyncio
import time
from typing import Any, Callable, Dict, Optional
from loguru import logger

from .config import get_settings
from .store import PetStore
from .utils.sample_data import seed_sample_data

Seeder = Callable[[PetStore, bool], None]


class StoreInitializer:
    """Tracks whether seeding succeeded and retries when it did not."""

    def __init__(
        self,
        store: PetStore,
        seeder: Seeder = seed_sample_data,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ):
        settings = get_settings()
        self.store = store
        self.seeder = seeder
        self.max_retries = max_retries if max_retries is not None else settings.init_max_retries
        self.retry_delay = retry_delay if retry_delay is not None else settings.init_retry_delay
        self.initialized = False
        self.retries = 0
        self.pending_retry: Optional["asyncio.Task[bool]"] = None

    def ensure_initialized(self, force: bool = False) -> bool:
        """
        Seed the store unless that already succeeded.

        Args:
            force: Reseed even if already initialized

        Returns:
            True if the store holds pets after this call. False means seeding
            failed; a retry may have been scheduled.
        """
        if self.initialized and not force:
            logger.debug("Store already initialized, skipping")
            return True

        logger.info("Initializing application data...")
        self.seeder(self.store, force)

        count = self.store.pet_count()
        if count:
            self._mark_initialized()
            logger.info(f"Application initialized with {count} pets")
            return True

        self.retries += 1
        logger.error(
            f"No pets available after initialization! (attempt {self.retries}/{self.max_retries})"
        )

        if self.retries >= self.max_retries:
            logger.critical("Max retries reached. Still no pets after forced initialization!")
            self.retries = 0
            return False

        self._schedule_retry(self.retries)
        return False

    def verify(self) -> bool:
        """Check the store currently holds pets. Does not touch retry state."""
        if self.store.pet_count() == 0:
            logger.warning("Data verification failed: no pets found")
            return False
        return True

    @property
    def retry_pending(self) -> bool:
        return self.pending_retry is not None and not self.pending_retry.done()

    async def wait_for_retry(self) -> Optional[bool]:
        """
        Wait for the scheduled retry, if any.

        Returns:
            The retry's outcome, or None when nothing was scheduled
        """
        if self.pending_retry is None:
            return None
        return await self.pending_retry

    def status(self) -> Dict[str, Any]:
        return {
            "initialized": self.initialized,
            "retries": self.retries,
            "retryPending": self.retry_pending,
        }

    def _mark_initialized(self) -> None:
        self.initialized = True
        self.retries = 0

    def _schedule_retry(self, attempt: int) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            logger.info(f"Retrying with force=True in {self.retry_delay}s")
            time.sleep(self.retry_delay)
            self._retry(attempt)
            return

        if self.retry_pending:
            logger.info("A seeding retry is already pending")
            return

        logger.info(f"Scheduling retry with force=True in {self.retry_delay}s")
        self.pending_retry = loop.create_task(self._delayed_retry(attempt))

    async def _delayed_retry(self, attempt: int) -> bool:
        await asyncio.sleep(self.retry_delay)
        try:
            return self._retry(attempt)
        except Exception as e:
            logger.exception(f"Seeding retry {attempt} raised: {e}")
            return False

    def _retry(self, attempt: int) -> bool:
        self.seeder(self.store, True)
        count = self.store.pet_count()
        if count == 0:
            logger.error(f"Still no pets after retry {attempt}. Will try again later.")
            return False

        logger.info(f"Successfully loaded {count} pets on retry {attempt}")
        self._mark_initialized()
        return True
