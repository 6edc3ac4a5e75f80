# tasks.py
# Description: Detached ("fire-and-forget") task helpers.
#
# Imports
import asyncio
from typing import Any, Coroutine, List, Optional, Set
#
# Third-Party Imports
from loguru import logger
#
########################################################################################################################
#
logger = logger.bind(module="tasks")

# Strong references keep detached tasks alive until they finish.
_BACKGROUND_TASKS: Set[asyncio.Task] = set()


async def _guarded(coro: Coroutine[Any, Any, Any], name: str) -> None:
    try:
        await coro
    except asyncio.CancelledError:
        logger.debug(f"Detached task '{name}' was cancelled")
        raise
    except Exception:
        logger.exception(f"Detached task '{name}' failed")


def fire_and_forget(coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> asyncio.Task:
    """
    Start ``coro`` as a detached task on the running loop.

    The spawner never joins the task. Any exception raised inside it is
    logged and swallowed so sibling operations are never aborted.
    """
    task_name = name or getattr(coro, "__qualname__", "detached")
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coro.close()
        raise
    task = loop.create_task(_guarded(coro, task_name), name=task_name)
    _BACKGROUND_TASKS.add(task)
    task.add_done_callback(_BACKGROUND_TASKS.discard)
    return task


def pending_background_tasks() -> List[asyncio.Task]:
    """Return the detached tasks that have not finished yet."""
    return [task for task in _BACKGROUND_TASKS if not task.done()]


async def drain_background_tasks(timeout: Optional[float] = None) -> None:
    """
    Wait until every detached task (including ones spawned while waiting) is done.

    Used at shutdown and in tests. Tasks still running after ``timeout``
    seconds are cancelled.
    """
    loop = asyncio.get_running_loop()
    deadline = None if timeout is None else loop.time() + timeout
    current = asyncio.current_task()
    while True:
        pending = [task for task in pending_background_tasks()
                   if task is not current and task.get_loop() is loop]
        if not pending:
            return
        remaining = None if deadline is None else max(0.0, deadline - loop.time())
        done, not_done = await asyncio.wait(pending, timeout=remaining)
        if not_done and deadline is not None and loop.time() >= deadline:
            logger.warning(f"Cancelling {len(not_done)} detached task(s) still running after {timeout}s")
            for task in not_done:
                task.cancel()
            await asyncio.gather(*not_done, return_exceptions=True)
            return

#
# End of tasks.py
########################################################################################################################
