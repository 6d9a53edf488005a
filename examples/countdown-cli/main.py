"""Terminal countdown driven by a real heartbeat thread.

Prints the remaining time in place until it reaches zero. Ctrl+C pauses;
a second Ctrl+C within the pause quits.

Run: python examples/countdown-cli/main.py --minutes 1 --seconds 30
"""
from __future__ import annotations

import argparse
import logging
import sys
import threading

from countdown import (
    CountdownConfig,
    CountdownEngine,
    InvalidConfigurationError,
    MonotonicClock,
    Status,
    ThreadScheduler,
    timer_title,
)
from countdown.config import DEFAULT_INTERVAL_MS, DEFAULT_MINUTES, MS_PER_MINUTE, MS_PER_SECOND

logger = logging.getLogger("countdown-cli")

REFRESH_S = 0.25


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Countdown timer in the terminal")
    p.add_argument("--minutes", type=int, default=None,
                   help=f"Whole minutes (default: {DEFAULT_MINUTES} when --seconds is omitted)")
    p.add_argument("--seconds", type=int, default=0, help="Extra seconds (default: 0)")
    p.add_argument("--interval", type=int, default=DEFAULT_INTERVAL_MS,
                   help=f"Heartbeat interval in ms (default: {DEFAULT_INTERVAL_MS})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log engine transitions")
    return p.parse_args()


def build_config(args: argparse.Namespace) -> CountdownConfig:
    minutes = args.minutes
    if minutes is None:
        minutes = 0 if args.seconds else DEFAULT_MINUTES
    return CountdownConfig(
        duration_ms=minutes * MS_PER_MINUTE + args.seconds * MS_PER_SECOND,
        interval_ms=args.interval,
    )


def run(engine: CountdownEngine, done: threading.Event) -> int:
    """Redraw until finished. Ctrl+C pauses; returns 130 if the user quits."""
    while True:
        try:
            while not done.wait(REFRESH_S):
                print(f"\r{engine.display()} ", end="", flush=True)
            return 0
        except KeyboardInterrupt:
            engine.pause()
            print(f"\r{engine.display()} paused -- Enter to resume, Ctrl+C to quit", flush=True)
            try:
                input()
            except (KeyboardInterrupt, EOFError):
                print()
                return 130
            engine.start()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
    except InvalidConfigurationError as e:
        logger.error("%s", e)
        return 2

    scheduler = ThreadScheduler()
    engine = CountdownEngine(scheduler, config, MonotonicClock())
    done = threading.Event()
    engine.subscribe_finished(done.set)

    if config.duration_ms % MS_PER_MINUTE == 0:
        print(timer_title(config.duration_ms // MS_PER_MINUTE))
    engine.start()

    code = run(engine, done)
    if code:
        engine.dispose()
        scheduler.shutdown()
        return code

    print(f"\r{engine.display()}  done")
    if engine.status is not Status.FINISHED:
        logger.warning("countdown stopped in state %s", engine.status.name)
    engine.dispose()
    scheduler.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
