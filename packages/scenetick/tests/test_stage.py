"""Tests for stage lifecycle, frame stepping and deferred callbacks."""

import pytest
from scenetick import Actor, Stage, StageConfig
from scenetick.clock import Clock
from scenetick.timers import TimerQueue


class Recorder:
    """Steppable that records every delta it sees and never completes."""

    def __init__(self):
        self.actor = None
        self.deltas = []

    def act(self, delta):
        self.deltas.append(delta)
        return False


# --- Initialization ---

def test_stage_init_defaults():
    stage = Stage()
    assert stage.config == StageConfig()
    assert stage.clock.fps == 60
    assert stage.clock.frame_number == 0
    assert isinstance(stage.clock, Clock)
    assert isinstance(stage.timers, TimerQueue)
    assert stage.actors == ()


def test_stage_init_custom_config():
    stage = Stage(StageConfig(fps=30, time_scale=0.5))
    assert stage.clock.fps == 30
    assert stage.config.time_scale == 0.5


def test_stage_rejects_negative_time_scale():
    with pytest.raises(ValueError, match="time_scale"):
        Stage(StageConfig(time_scale=-1.0))


def test_config_is_frozen():
    config = StageConfig()
    with pytest.raises(AttributeError):
        config.fps = 10  # type: ignore[misc]


# --- Actors ---

def test_add_and_remove_actor():
    stage = Stage()
    actor = Actor("ball")
    stage.add_actor(actor)
    assert stage.actors == (actor,)
    assert actor.stage is stage

    stage.remove_actor(actor)
    assert stage.actors == ()
    assert actor.stage is None


def test_add_actor_twice_keeps_one_entry():
    stage = Stage()
    actor = Actor()
    stage.add_actor(actor)
    stage.add_actor(actor)
    assert stage.actors == (actor,)


def test_moving_actor_between_stages():
    first, second = Stage(), Stage()
    actor = Actor()
    first.add_actor(actor)
    second.add_actor(actor)
    assert first.actors == ()
    assert second.actors == (actor,)
    assert actor.stage is second


def test_removed_actor_stops_acting():
    """Removing an actor is how its running actions are cancelled."""
    stage = Stage()
    actor = Actor()
    recorder = Recorder()
    actor.add_action(recorder)
    stage.add_actor(actor)

    stage.act(0.5)
    stage.remove_actor(actor)
    stage.act(0.5)

    assert recorder.deltas == [0.5]
    assert actor.actions == (recorder,)


# --- act() / step() / run() ---

def test_act_advances_clock_and_actors():
    stage = Stage()
    actor = Actor()
    recorder = Recorder()
    actor.add_action(recorder)
    stage.add_actor(actor)

    stage.act(0.25)
    stage.act(0.5)

    assert stage.clock.frame_number == 2
    assert stage.clock.elapsed == 0.75
    assert recorder.deltas == [0.25, 0.5]


def test_step_uses_clock_dt():
    stage = Stage(StageConfig(fps=4))
    actor = Actor()
    recorder = Recorder()
    actor.add_action(recorder)
    stage.add_actor(actor)

    stage.step()
    assert recorder.deltas == [0.25]


def test_run_steps_n_frames():
    stage = Stage(StageConfig(fps=4))
    stage.run(8)
    assert stage.clock.frame_number == 8
    assert stage.clock.elapsed == 2.0


def test_time_scale_scales_deltas():
    stage = Stage(StageConfig(fps=4, time_scale=0.5))
    actor = Actor()
    recorder = Recorder()
    actor.add_action(recorder)
    stage.add_actor(actor)

    stage.act(1.0)
    assert recorder.deltas == [0.5]
    assert stage.clock.elapsed == 0.5


def test_negative_delta_rejected():
    stage = Stage()
    with pytest.raises(ValueError):
        stage.act(-0.1)


# --- schedule() ---

def test_schedule_fires_once_after_delay():
    stage = Stage()
    fired = []
    stage.schedule(1.0, lambda: fired.append(stage.clock.elapsed))

    stage.act(0.5)
    assert fired == []
    stage.act(0.5)
    assert fired == [1.0]
    stage.act(0.5)
    assert fired == [1.0]


def test_schedule_fires_after_actors_act():
    """Deferred calls observe the positions written during the same frame."""
    stage = Stage()
    actor = Actor()
    stage.add_actor(actor)

    class MoveDown:
        def __init__(self):
            self.actor = None

        def act(self, delta):
            self.actor.y += 10
            return False

    actor.add_action(MoveDown())
    seen = []
    stage.schedule(0.5, lambda: seen.append(actor.y))
    stage.act(0.5)
    assert seen == [10]


def test_paused_stage_does_not_fire():
    stage = Stage(StageConfig(time_scale=0.0))
    fired = []
    stage.schedule(0.5, lambda: fired.append(1))
    stage.act(1.0)
    assert fired == []


# --- Frame hooks ---

def test_on_frame_hook_receives_context():
    stage = Stage()
    seen = []
    stage.on_frame(lambda s, ctx: seen.append((s, ctx.frame_number, ctx.dt)))

    stage.act(0.25)
    stage.act(0.5)
    assert seen == [(stage, 1, 0.25), (stage, 2, 0.5)]
