import asyncio
import inspect
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from logging_config import get_logger

logger = get_logger(__name__)


def seconds_until(hour: int, minute: int = 0, now: Optional[datetime] = None) -> float:
    """Seconds from ``now`` to the next occurrence of ``hour:minute``."""
    now = now or datetime.now()
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return (target - now).total_seconds()


class DailyJob:
    """Runs ``func`` once a day at ``hour:minute`` local time on the event loop."""

    def __init__(self, name: str, func: Callable[[], Any], hour: int = 0, minute: int = 0):
        self.name = name
        self.func = func
        self.hour = hour
        self.minute = minute
        self.task: Optional[asyncio.Task] = None

    async def run_once(self) -> Any:
        logger.info(f"Running scheduled job {self.name}")
        try:
            result = self.func()
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            logger.error(f"Scheduled job {self.name} failed: {e}", exc_info=True)
            return None

    async def run_forever(self) -> None:
        logger.info(f"Scheduled job {self.name} armed for {self.hour:02d}:{self.minute:02d} daily")
        try:
            while True:
                delay = seconds_until(self.hour, self.minute)
                logger.debug(f"Job {self.name} sleeping {delay:.0f}s")
                await asyncio.sleep(delay)
                await self.run_once()
        except asyncio.CancelledError:
            logger.info(f"Scheduled job {self.name} cancelled")
            raise

    def start(self) -> asyncio.Task:
        if self.task is None or self.task.done():
            self.task = asyncio.create_task(self.run_forever())
        return self.task

    async def stop(self) -> None:
        if self.task is None:
            return
        self.task.cancel()
        try:
            await self.task
        except asyncio.CancelledError:
            pass
        self.task = None
