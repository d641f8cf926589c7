"""
Detached bookkeeping tasks that must never block or fail a request
"""
import asyncio
import logging
from typing import Awaitable, Optional, Set

logger = logging.getLogger(__name__)


class BackgroundTaskManager:
    """Runs fire-and-forget coroutines and logs their failures"""

    def __init__(self):
        self.is_running = False
        self.tasks: Set[asyncio.Task] = set()

    async def start(self):
        """Mark the manager as accepting work"""
        if self.is_running:
            return
        self.is_running = True
        logger.info("Background task manager started")

    def spawn(self, coro: Awaitable, name: Optional[str] = None) -> asyncio.Task:
        """Schedule a coroutine without awaiting it"""
        task = asyncio.ensure_future(coro)
        if name:
            task.set_name(name)
        self.tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task):
        self.tasks.discard(task)
        if task.cancelled():
            logger.info(f"Cancelled task: {task.get_name()}")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Background task {task.get_name()} failed: {exc}", exc_info=exc)

    async def drain(self, timeout: Optional[float] = None):
        """Wait for every pending task to finish"""
        if not self.tasks:
            return
        done, pending = await asyncio.wait(set(self.tasks), timeout=timeout)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.wait(pending)

    async def stop(self, timeout: Optional[float] = 5.0):
        """Finish outstanding work, cancelling whatever outlives the timeout"""
        if not self.is_running and not self.tasks:
            return
        logger.info(f"Stopping background task manager ({len(self.tasks)} pending)")
        await self.drain(timeout=timeout)
        self.is_running = False
        logger.info("Background tasks stopped")


background_manager = BackgroundTaskManager()


def get_background_manager() -> BackgroundTaskManager:
    """Get the process-wide BackgroundTaskManager"""
    return background_manager
