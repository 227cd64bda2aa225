"""Drop -- one ball falling and bouncing, printed frame by frame.

Demonstrates:
- Obtaining a pooled GravityAction with gravity()
- Attaching it to an actor on a stage
- Batching it through an ActionList with a completion callback

Run: python packages/scenetick-gravity/examples/drop.py
"""

from scenetick import Actor, Stage, StageConfig
from scenetick_actions import ActionList
from scenetick_gravity import gravity


def main() -> None:
    print("=== Drop ===\n")

    stage = Stage(StageConfig(fps=20))
    ball = Actor("ball", y=0.0)
    stage.add_actor(ball)

    done = []
    batch = ActionList(stage)
    batch.add(gravity(3000.0, 0.0, 300.0, 2, 0.5), ball)
    wait = batch.process(lambda: done.append(stage.clock.elapsed))
    print(f"  completion scheduled in {wait:.4f}s\n")

    while not done:
        stage.step()
        ctx = stage.clock.context()
        bar = "#" * int(ball.y / 10)
        print(f"  frame {ctx.frame_number:3d}  t={ctx.elapsed:.3f}s  y={ball.y:7.2f}  {bar}")

    print(f"\nDone at t={done[0]:.3f}s.")


if __name__ == "__main__":
    main()
