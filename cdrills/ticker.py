"""Count seconds on a background thread until the main thread stops it."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO


class Ticker:
    """Prints a rising counter every ``interval`` seconds until stopped."""

    def __init__(self, out: TextIO | None = None, interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.out = out
        self.interval = interval
        self.count = 0
        self._stopped = threading.Event()

    def run(self) -> int:
        """Print the counter until stopped; return how many values were printed."""
        out = self.out if self.out is not None else sys.stdout
        out.write("\nPrinting from Thread...\n")
        out.flush()
        while not self._stopped.is_set():
            self.count += 1
            out.write(f"{self.count}\n")
            out.flush()
            self._stopped.wait(self.interval)
        return self.count

    def stop(self) -> None:
        """Ask the running counter to finish."""
        self._stopped.set()


def count_until(seconds: float, out: TextIO | None = None, interval: float = 1.0) -> int:
    """Run a Ticker on a thread for ``seconds``; return how many values it printed."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    stream = out if out is not None else sys.stdout
    stream.write("\nBefore Thread\n")
    stream.flush()

    ticker = Ticker(stream, interval)
    thread = threading.Thread(target=ticker.run)
    thread.start()
    time.sleep(seconds)
    ticker.stop()
    thread.join()

    stream.write("\nAfter Thread\n")
    stream.flush()
    return ticker.count


def main(argv: list[str] | None = None) -> int:
    """Read a number of seconds and count on a thread for that long."""
    print("Enter the sleep count (in secs): ", end="", flush=True)
    try:
        seconds = int(sys.stdin.readline().strip())
        if seconds < 0:
            raise ValueError("negative count")
    except ValueError:
        print("\nInvalid sleep count", file=sys.stderr)
        return 1
    count_until(seconds)
    return 0


if __name__ == "__main__":
    sys.exit(main())