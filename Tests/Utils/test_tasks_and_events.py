# test_tasks_and_events.py
# Description: Tests for detached task helpers and event hooks
#
# Imports
import asyncio
import pytest
from unittest.mock import Mock
#
# Local Imports
from screenflow.Utils.events import EventHook
from screenflow.Utils.tasks import drain_background_tasks, fire_and_forget, pending_background_tasks
#
########################################################################################################################
#
# Detached Task Tests:

class TestFireAndForget:

    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, loguru_messages):
        async def explode():
            raise RuntimeError("boom")

        task = fire_and_forget(explode(), name="explode")
        await task

        assert task.exception() is None
        assert any(m.startswith("ERROR|Detached task 'explode' failed") for m in loguru_messages)

    @pytest.mark.asyncio
    async def test_failure_does_not_abort_siblings(self):
        finished = []

        async def fail():
            raise ValueError("nope")

        async def succeed():
            await asyncio.sleep(0.01)
            finished.append(True)

        fire_and_forget(fail())
        fire_and_forget(succeed())
        await drain_background_tasks()

        assert finished == [True]

    @pytest.mark.asyncio
    async def test_drain_waits_for_tasks_spawned_while_draining(self):
        order = []

        async def child():
            await asyncio.sleep(0.01)
            order.append("child")

        async def parent():
            await asyncio.sleep(0.01)
            fire_and_forget(child())
            order.append("parent")

        fire_and_forget(parent())
        await drain_background_tasks()

        assert order == ["parent", "child"]
        assert pending_background_tasks() == []

    @pytest.mark.asyncio
    async def test_drain_timeout_cancels_stragglers(self, loguru_messages):
        task = fire_and_forget(asyncio.sleep(10), name="sleeper")
        await drain_background_tasks(timeout=0.02)

        assert task.cancelled()
        assert any("still running" in m for m in loguru_messages)

    def test_requires_running_loop(self):
        async def noop():
            pass

        with pytest.raises(RuntimeError):
            fire_and_forget(noop())

########################################################################################################################
#
# Event Hook Tests:

class TestEventHook:

    def test_fire_in_subscription_order(self):
        calls = []
        hook = EventHook("changed")
        hook.connect(lambda value: calls.append(("a", value)))
        hook.connect(lambda value: calls.append(("b", value)))

        hook.fire(3)
        assert calls == [("a", 3), ("b", 3)]

    def test_connect_twice_and_disconnect(self):
        handler = Mock()
        hook = EventHook()
        hook.connect(handler)
        hook.connect(handler)
        assert len(hook) == 1

        assert hook.disconnect(handler) is True
        assert hook.disconnect(handler) is False
        hook.fire()
        handler.assert_not_called()

    def test_failing_handler_does_not_stop_others(self, loguru_messages):
        after = Mock()
        hook = EventHook("closing")
        hook.connect(Mock(side_effect=RuntimeError("bad handler")))
        hook.connect(after)

        hook.fire("payload")

        after.assert_called_once_with("payload")
        assert any("for event 'closing' failed" in m for m in loguru_messages)

#
# End of test_tasks_and_events.py
########################################################################################################################
