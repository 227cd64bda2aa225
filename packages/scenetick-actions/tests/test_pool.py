"""Tests for ActionPool and the pooled factory helpers."""

import pytest
from scenetick import Actor
from scenetick_actions import (
    ActionPool,
    Delay,
    MoveToY,
    Parallel,
    Run,
    Sequence,
    action_duration,
    delay,
    forever,
    move_to_y,
    parallel,
    run,
    sequence,
)


class TestActionPool:
    def test_obtain_constructs_when_empty(self):
        pool = ActionPool()
        move = pool.obtain(MoveToY)
        assert isinstance(move, MoveToY)
        assert move.pool is pool

    def test_free_then_obtain_reuses_instance(self):
        pool = ActionPool()
        move = pool.obtain(MoveToY)
        pool.free(move)
        assert pool.free_count(MoveToY) == 1
        assert pool.obtain(MoveToY) is move
        assert pool.free_count(MoveToY) == 0

    def test_free_resets_state(self):
        pool = ActionPool()
        move = pool.obtain(MoveToY)
        move.y = 50.0
        move.duration = 2.0
        move.easing = "ease_out"
        move.act(1.0)
        pool.free(move)

        assert move.y == 0.0
        assert move.duration == 0.0
        assert move.easing == "linear"
        assert move.elapsed == 0.0
        assert move.pool is None
        assert move.actor is None

    def test_capacity_per_type(self):
        pool = ActionPool(max_per_type=1)
        pool.free(Run())
        pool.free(Run())
        assert pool.free_count(Run) == 1

    def test_pools_are_keyed_by_exact_type(self):
        pool = ActionPool()
        pool.free(Parallel())
        assert pool.free_count(Parallel) == 1
        assert pool.free_count(Sequence) == 0
        assert isinstance(pool.obtain(Sequence), Sequence)

    def test_double_free_keeps_one_entry(self):
        pool = ActionPool()
        run_action = Run()
        pool.free(run_action)
        pool.free(run_action)
        assert pool.free_count(Run) == 1

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            ActionPool(max_per_type=-1)

    def test_clear(self):
        pool = ActionPool()
        pool.free(Run())
        pool.clear()
        assert pool.free_count(Run) == 0

    def test_finished_action_returns_to_pool(self):
        pool = ActionPool()
        actor = Actor()
        move = pool.obtain(MoveToY)
        move.y = 5.0
        move.duration = 0.5
        actor.add_action(move)

        actor.act(0.5)

        assert actor.y == 5.0
        assert not actor.has_actions()
        assert pool.free_count(MoveToY) == 1

    def test_composite_returns_children_to_their_pools(self):
        pool = ActionPool()
        actor = Actor()
        actor.add_action(
            sequence(run(lambda: None, pool=pool), run(lambda: None, pool=pool), pool=pool)
        )
        for _ in range(2):
            actor.act(0.1)
        assert pool.free_count(Sequence) == 1
        assert pool.free_count(Run) == 2


class TestFactories:
    def test_delay(self):
        pool = ActionPool()
        inner = move_to_y(10.0, 1.0, pool=pool)
        d = delay(0.5, inner, pool=pool)
        assert isinstance(d, Delay)
        assert d.pool is pool
        assert action_duration(d) == 1.5

    def test_sequence_and_parallel(self):
        pool = ActionPool()
        a = move_to_y(1.0, 1.0, pool=pool)
        b = move_to_y(1.0, 2.0, pool=pool)
        assert action_duration(sequence(a, b, pool=pool)) == 3.0

        c = move_to_y(1.0, 1.0, pool=pool)
        d = move_to_y(1.0, 2.0, pool=pool)
        assert action_duration(parallel(c, d, pool=pool)) == 2.0

    def test_forever_and_run(self):
        pool = ActionPool()
        calls = []
        f = forever(run(lambda: calls.append(1), pool=pool), pool=pool)
        f.act(0.0)
        f.act(0.0)
        assert calls == [1, 1]
        assert action_duration(f) == 0.0

    def test_move_to_y_validates(self):
        with pytest.raises(ValueError, match="non-negative"):
            move_to_y(1.0, -1.0, pool=ActionPool())
        with pytest.raises(ValueError, match="Unknown easing"):
            move_to_y(1.0, 1.0, easing="wobble", pool=ActionPool())

    def test_move_to_y_defaults_to_shared_pool(self):
        from scenetick_actions import default_pool

        move = move_to_y(3.0, 0.25)
        assert move.pool is default_pool
