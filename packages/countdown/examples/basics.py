"""Countdown basics -- start, pause, resume and finish on a simulated clock.

Demonstrates:
- Driving a CountdownEngine with a ManualClock and ManualScheduler
- Irregular heartbeat spacing that still yields exact remaining time
- Pausing (time while paused never counts) and resuming
- The finished notification firing exactly once

Run: python -m examples.basics
"""

from countdown import (
    CountdownConfig,
    CountdownEngine,
    ManualClock,
    ManualScheduler,
    timer_title,
)


def show(label: str, engine: CountdownEngine, clock: ManualClock) -> None:
    print(f"  [t={clock.now():>6} ms] {label:<22} {engine.display()}  {engine.status.value}")


def main() -> None:
    print(f"=== Basics: {timer_title(1)} ===\n")

    clock = ManualClock()
    scheduler = ManualScheduler(clock)
    engine = CountdownEngine(scheduler, CountdownConfig.from_minutes(1), clock)
    engine.subscribe_finished(lambda: print(f"  [t={clock.now():>6} ms] *** finished ***"))

    show("created", engine, clock)
    engine.start()
    show("start", engine, clock)

    # Wake-ups arrive late and unevenly; the countdown follows the clock.
    for gap in (100, 350, 2_000, 17_550):
        clock.advance(gap)
        scheduler.fire()
        show(f"heartbeat after {gap} ms", engine, clock)

    engine.pause()
    show("pause", engine, clock)
    scheduler.advance(30_000)
    show("30 s later (paused)", engine, clock)

    engine.start()
    show("resume", engine, clock)
    scheduler.advance(45_000)
    show("45 s later", engine, clock)

    engine.reset()
    show("reset", engine, clock)
    engine.dispose()


if __name__ == "__main__":
    main()
