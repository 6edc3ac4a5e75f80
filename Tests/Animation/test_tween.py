# test_tween.py
# Description: Tests for the tween engine and easing curves
#
# Imports
import asyncio
import pytest
#
# Local Imports
from screenflow.Animation.easing import Ease, evaluate
from screenflow.Animation.tween import Tweener, interpolate
#
########################################################################################################################
#
# Test Fixtures:

class Target:
    def __init__(self):
        self.alpha = 0.0
        self.position = (0.0, 0.0)

########################################################################################################################
#
# Easing Tests:

class TestEasing:

    @pytest.mark.parametrize("ease", list(Ease))
    def test_curves_start_and_end_on_bounds(self, ease):
        assert evaluate(ease, 0.0) == pytest.approx(0.0)
        assert evaluate(ease, 1.0) == pytest.approx(1.0)

    def test_progress_is_clamped(self):
        assert evaluate(Ease.LINEAR, -1.0) == 0.0
        assert evaluate(Ease.LINEAR, 2.0) == 1.0

    def test_parse_accepts_config_names(self):
        assert Ease.parse("OUT_CIRC") is Ease.OUT_CIRC
        assert Ease.parse(" linear ") is Ease.LINEAR
        assert Ease.parse(Ease.IN_QUAD) is Ease.IN_QUAD
        with pytest.raises(ValueError):
            Ease.parse("bounce")

    def test_interpolate_numbers_and_tuples(self):
        assert interpolate(0.0, 10.0, 0.5) == 5.0
        assert interpolate((0.0, 4.0), (10.0, 8.0), 0.25) == (2.5, 5.0)

########################################################################################################################
#
# Tween Tests:

class TestTweener:

    @pytest.mark.asyncio
    async def test_tween_arrives_at_end_value(self, tweener):
        target = Target()
        tween = tweener.to(target, "alpha", 1.0, 0.02)

        assert tween.is_active is True
        assert await tween.wait_for_completion() is True
        assert target.alpha == 1.0
        assert tween.arrived is True
        assert tweener.active_tweens(target) == []

    @pytest.mark.asyncio
    async def test_zero_duration_applies_at_once(self, tweener):
        target = Target()
        tween = tweener.to(target, "position", [3.0, 4.0], 0)

        assert await tween.wait_for_completion() is True
        assert target.position == (3.0, 4.0)

    @pytest.mark.asyncio
    async def test_killed_tween_reports_false_and_stops(self, tweener):
        target = Target()
        tween = tweener.to(target, "alpha", 1.0, 1.0)
        await asyncio.sleep(0.02)

        assert tweener.kill(target) == 1
        assert await tween.wait_for_completion() is False
        assert tween.arrived is False

        value = target.alpha
        assert 0.0 <= value < 1.0
        await asyncio.sleep(0.02)
        assert target.alpha == value

    @pytest.mark.asyncio
    async def test_kill_only_touches_its_target(self, tweener):
        first, second = Target(), Target()
        tween_a = tweener.to(first, "alpha", 1.0, 1.0)
        tween_b = tweener.to(second, "alpha", 1.0, 0.02)

        tweener.kill(first)
        assert tween_a.is_active is False
        assert await tween_b.wait_for_completion() is True
        assert second.alpha == 1.0

    @pytest.mark.asyncio
    async def test_kill_after_completion_is_noop(self, tweener):
        target = Target()
        tween = tweener.to(target, "alpha", 1.0, 0)
        await tween.wait_for_completion()

        assert tweener.kill(target) == 0
        tween.kill()
        assert tween.arrived is True

    @pytest.mark.asyncio
    async def test_waiter_cancellation_does_not_kill_tween(self, tweener):
        target = Target()
        tween = tweener.to(target, "alpha", 1.0, 0.05)
        waiter = asyncio.create_task(tween.wait_for_completion())
        await asyncio.sleep(0)
        waiter.cancel()

        assert await tween.wait_for_completion() is True
        assert target.alpha == 1.0

    def test_frame_interval_from_config(self):
        assert Tweener().frame_interval == pytest.approx(0.016)

#
# End of test_tween.py
########################################################################################################################
