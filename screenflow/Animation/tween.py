# tween.py
# Description: asyncio attribute tweens with per-target kill semantics.
#
# Imports
import asyncio
from typing import Any, Dict, List, Optional, Sequence
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from ..config import get_runtime_setting
from .easing import Ease, evaluate
#
########################################################################################################################
#
logger = logger.bind(module="tween")

DEFAULT_FRAME_INTERVAL = 0.016


def interpolate(start: Any, end: Any, t: float) -> Any:
    """Linear interpolation for numbers and equally sized numeric tuples."""
    if isinstance(start, (tuple, list)):
        return tuple(a + (b - a) * t for a, b in zip(start, end))
    return start + (end - start) * t


class Tween:
    """
    Drives ``target.attribute`` from its current value to ``end_value``.

    A tween finishes in one of two ways: it arrives (the end value is applied)
    or it is killed (the attribute keeps whatever value it had). Awaiting
    ``wait_for_completion()`` tells the two apart.
    """

    def __init__(self, target: Any, attribute: str, end_value: Any, duration: float,
                 ease: Ease = Ease.LINEAR, frame_interval: float = DEFAULT_FRAME_INTERVAL):
        self.target = target
        self.attribute = attribute
        self.end_value = tuple(end_value) if isinstance(end_value, list) else end_value
        self.duration = max(0.0, float(duration))
        self.ease = ease
        self.frame_interval = frame_interval
        self._loop = asyncio.get_running_loop()
        self._done: asyncio.Future = self._loop.create_future()
        self._task: Optional[asyncio.Task] = None

    @property
    def is_active(self) -> bool:
        return not self._done.done()

    @property
    def arrived(self) -> bool:
        return self._done.done() and self._done.result()

    def start(self) -> "Tween":
        if self._task is None:
            self._task = self._loop.create_task(self._run(), name=f"tween:{type(self.target).__name__}.{self.attribute}")
        return self

    async def _run(self) -> None:
        start_value = getattr(self.target, self.attribute)
        if self.duration == 0:
            setattr(self.target, self.attribute, self.end_value)
            self._finish(True)
            return
        began = self._loop.time()
        while True:
            progress = min(1.0, (self._loop.time() - began) / self.duration)
            if progress >= 1.0:
                break
            setattr(self.target, self.attribute, interpolate(start_value, self.end_value, evaluate(self.ease, progress)))
            await asyncio.sleep(self.frame_interval)
        setattr(self.target, self.attribute, self.end_value)
        self._finish(True)

    def _finish(self, arrived: bool) -> None:
        if not self._done.done():
            self._done.set_result(arrived)

    def kill(self) -> None:
        """Abandon the tween where it is. Has no effect once it has finished."""
        if self._done.done():
            return
        if self._task is not None:
            self._task.cancel()
        self._finish(False)

    async def wait_for_completion(self) -> bool:
        """Return True if the tween arrived, False if it was killed."""
        return await asyncio.shield(self._done)


class Tweener:
    """Owns running tweens and lets callers kill every tween on a target."""

    def __init__(self, frame_interval: Optional[float] = None):
        if frame_interval is None:
            frame_interval = float(get_runtime_setting("runtime", "frame_interval", DEFAULT_FRAME_INTERVAL))
        self.frame_interval = frame_interval
        self._tweens: Dict[int, List[Tween]] = {}

    def to(self, target: Any, attribute: str, end_value: Any, duration: float,
           ease: Ease = Ease.LINEAR) -> Tween:
        """Start a tween on ``target.attribute`` and return it."""
        tween = Tween(target, attribute, end_value, duration, ease, self.frame_interval)
        key = id(target)
        self._tweens.setdefault(key, []).append(tween)
        tween._done.add_done_callback(lambda _f: self._forget(key, tween))
        return tween.start()

    def kill(self, target: Any) -> int:
        """Kill every active tween on ``target``. Returns how many were killed."""
        tweens = self._tweens.pop(id(target), [])
        killed = 0
        for tween in tweens:
            if tween.is_active:
                tween.kill()
                killed += 1
        if killed:
            logger.trace(f"Killed {killed} tween(s) on {type(target).__name__}")
        return killed

    def active_tweens(self, target: Any = None) -> Sequence[Tween]:
        if target is not None:
            return [t for t in self._tweens.get(id(target), []) if t.is_active]
        return [t for tweens in self._tweens.values() for t in tweens if t.is_active]

    def _forget(self, key: int, tween: Tween) -> None:
        tweens = self._tweens.get(key)
        if not tweens:
            return
        if tween in tweens:
            tweens.remove(tween)
        if not tweens:
            self._tweens.pop(key, None)


_DEFAULT_TWEENER: Optional[Tweener] = None


def get_default_tweener() -> Tweener:
    """Shared tweener used by animations that were not given one explicitly."""
    global _DEFAULT_TWEENER
    if _DEFAULT_TWEENER is None:
        _DEFAULT_TWEENER = Tweener()
    return _DEFAULT_TWEENER

#
# End of tween.py
########################################################################################################################
