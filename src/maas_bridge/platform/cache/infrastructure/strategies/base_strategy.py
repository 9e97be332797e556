"""Base cache strategy.

ONLY shared strategy plumbing - clock, capacity and the background sweep
task that reclaims expired entries independently of access patterns.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class BaseCacheStrategy(ABC):
    """Base class for in-process cache strategies.
    
    The sweep runs as an ``asyncio.Task`` on the running event loop. Tasks
    never keep the interpreter alive, so an idle sweep does not block
    shutdown. When no loop is running at construction time the sweep starts
    on the first ``set()`` made from inside a loop, or via ``start()``.
    Lazy expiry on ``get()`` is what guarantees correctness; the sweep only
    bounds memory held by entries nobody reads again.
    """
    
    CLEANUP_INTERVAL_SECONDS = 60.0
    strategy_name = "base"
    
    def __init__(
        self,
        max_size: int = 1000,
        *,
        clock: Optional[Clock] = None,
        sweep_interval: Optional[float] = None,
        autostart: bool = True
    ):
        """Initialize strategy.
        
        Args:
            max_size: Maximum number of entries before eviction
            clock: Time source returning POSIX seconds (defaults to time.time)
            sweep_interval: Seconds between background sweeps
            autostart: Start the sweep immediately if a loop is running
        """
        self._max_size = max_size
        self._clock = clock or time.time
        self._sweep_interval = sweep_interval or self.CLEANUP_INTERVAL_SECONDS
        self._sweep_task: Optional[asyncio.Task] = None
        self._disposed = False
        
        if autostart:
            self.start()
    
    @property
    def max_size(self) -> int:
        return self._max_size
    
    @property
    def sweep_interval(self) -> float:
        return self._sweep_interval
    
    @property
    def is_sweeping(self) -> bool:
        """True while a sweep task is scheduled."""
        return self._sweep_task is not None and not self._sweep_task.done()
    
    @property
    def is_disposed(self) -> bool:
        return self._disposed
    
    def now(self) -> float:
        """Current time according to the strategy clock."""
        return self._clock()
    
    def start(self) -> bool:
        """Start the background sweep on the running event loop.
        
        Returns:
            True if a sweep is running after the call
        """
        if self._disposed:
            return False
        if self.is_sweeping:
            return True
        
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop yet; the next set() from inside a loop starts it
            return False
        
        self._sweep_task = loop.create_task(self._sweep_loop())
        logger.debug(
            f"Started {self.strategy_name} cache sweep every {self._sweep_interval}s"
        )
        return True
    
    def dispose(self) -> None:
        """Cancel the background sweep. Idempotent; a disposed strategy never restarts it."""
        self._disposed = True
        if self._sweep_task is not None:
            if not self._sweep_task.done():
                self._sweep_task.cancel()
                logger.debug(f"{self.strategy_name} cache sweep stopped")
            self._sweep_task = None
    
    def _ensure_sweeping(self) -> None:
        if not self._disposed and not self.is_sweeping:
            self.start()
    
    async def _sweep_loop(self) -> None:
        """Background sweep loop."""
        while True:
            try:
                await asyncio.sleep(self._sweep_interval)
                self.remove_expired_entries()
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception(f"{self.strategy_name} cache sweep failed")
    
    @abstractmethod
    def remove_expired_entries(self) -> int:
        """Remove every expired entry.
        
        Returns:
            Number of entries removed
        """
