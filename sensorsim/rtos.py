"""Producer/consumer simulation over a bounded queue shared by two threads."""

from __future__ import annotations

import argparse
import random
import sys
import threading
from collections import deque
from typing import TextIO

QUEUE_SIZE = 16
PRODUCE_INTERVAL = 1.0
CONSUME_INTERVAL = 2.0
_POLL_INTERVAL = 0.1


class RtosSimulation:
    """A fast producer feeding a slow consumer through a bounded FIFO queue.

    When the queue is full the producer discards its new value rather than
    waiting, reporting the loss.
    """

    def __init__(
        self,
        queue_size: int = QUEUE_SIZE,
        produce_interval: float = PRODUCE_INTERVAL,
        consume_interval: float = CONSUME_INTERVAL,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        if queue_size < 1:
            raise ValueError(f"queue_size must be positive, got {queue_size}")
        if produce_interval < 0 or consume_interval < 0:
            raise ValueError("intervals must not be negative")
        self.queue_size = queue_size
        self.produce_interval = produce_interval
        self.consume_interval = consume_interval
        self._rng = rng if rng is not None else random.Random()
        self._out = out if out is not None else sys.stdout
        self._queue: deque[float] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def _emit(self, message: str) -> None:
        print(message, file=self._out, flush=True)

    def produce_once(self) -> bool:
        """Generate one reading; return True if it was queued, False if dropped."""
        value = self._rng.randrange(1000) / 10.0
        with self._lock:
            if len(self._queue) >= self.queue_size:
                self._emit(f"[PRODUCER] DATA LOST! Value: {value:.2f} | Queue FULL")
                return False
            self._queue.append(value)
            self._emit(f"[PRODUCER] Produced: {value:.2f} | Queued: {len(self._queue)}")
            self._not_empty.notify()
            return True

    def consume_once(self, timeout: float | None = None) -> float | None:
        """Take the oldest reading, waiting for one; None if ``timeout`` expires."""
        with self._lock:
            if not self._not_empty.wait_for(lambda: self._queue, timeout):
                return None
            value = self._queue.popleft()
            self._emit(f"    [CONSUMER] Consumed: {value:.2f} | Queued: {len(self._queue)}")
            self._not_full.notify()
            return value

    def _producer_loop(self, stop: threading.Event) -> None:
        while not stop.is_set():
            self.produce_once()
            stop.wait(self.produce_interval)

    def _consumer_loop(self, stop: threading.Event) -> None:
        while not stop.is_set():
            if self.consume_once(timeout=_POLL_INTERVAL) is not None:
                stop.wait(self.consume_interval)

    def run(self, stop: threading.Event | None = None) -> None:
        """Run producer and consumer threads until ``stop`` is set."""
        stop_event = stop if stop is not None else threading.Event()
        workers = [
            threading.Thread(target=self._producer_loop, args=(stop_event,),
                             name="producer", daemon=True),
            threading.Thread(target=self._consumer_loop, args=(stop_event,),
                             name="consumer", daemon=True),
        ]
        for worker in workers:
            worker.start()
        try:
            for worker in workers:
                worker.join()
        finally:
            stop_event.set()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point for the producer/consumer simulation."""
    parser = argparse.ArgumentParser(
        description="Simulate a producer and a slower consumer sharing a queue."
    )
    parser.add_argument("--queue-size", type=int, default=QUEUE_SIZE)
    parser.add_argument("--produce-interval", type=float, default=PRODUCE_INTERVAL)
    parser.add_argument("--consume-interval", type=float, default=CONSUME_INTERVAL)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--duration", type=float, default=None,
        help="stop after this many seconds (runs until interrupted otherwise)",
    )
    args = parser.parse_args(argv)

    try:
        simulation = RtosSimulation(
            args.queue_size, args.produce_interval, args.consume_interval,
            random.Random(args.seed),
        )
    except ValueError as error:
        parser.error(str(error))

    print("=== RTOS Producer-Consumer Simulation Starting ===", flush=True)
    stop = threading.Event()
    timer = None
    if args.duration is not None:
        timer = threading.Timer(args.duration, stop.set)
        timer.daemon = True
        timer.start()
    try:
        simulation.run(stop)
    except KeyboardInterrupt:
        stop.set()
    finally:
        if timer is not None:
            timer.cancel()
    return 0


if __name__ == "__main__":
    sys.exit(main())