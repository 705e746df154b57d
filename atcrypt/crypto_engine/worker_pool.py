"""
Shared background executor for the ``*_async`` wrappers.

Hashing and signing are CPU-bound and short; offloading them keeps an
event loop responsive. The pool is created on first use.
"""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from atcrypt.config.settings import Settings

logger = logging.getLogger("ATCrypt.WorkerPool")

_executor: ThreadPoolExecutor | None = None
_lock = threading.Lock()


def get_executor() -> ThreadPoolExecutor:
    global _executor
    with _lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=Settings.WORKER_THREADS,
                thread_name_prefix="atcrypt-worker",
            )
            logger.debug("Worker pool started (%d threads)",
                         Settings.WORKER_THREADS)
        return _executor


async def run_in_worker(fn, *args):
    """Run ``fn(*args)`` on the shared pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_executor(), fn, *args)


def shutdown(wait: bool = True):
    global _executor
    with _lock:
        if _executor is not None:
            _executor.shutdown(wait=wait)
            _executor = None
            logger.debug("Worker pool stopped")
