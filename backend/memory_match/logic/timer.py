"""
Level countdown with freeze support.

The countdown never runs on its own: an external clock calls ``tick()`` once
per second. While frozen, ticks drain the freeze window instead of the main
countdown. The tick that exhausts the freeze does not also decrement the
main countdown; it resumes on the following tick.
"""

from dataclasses import dataclass


@dataclass
class CountdownTimer:
    """Seconds left in the level plus an optional freeze window."""

    time_remaining: int = 0
    frozen: bool = False
    frozen_seconds_left: int = 0

    def restart(self, seconds: int) -> None:
        """Start a fresh countdown, discarding any freeze."""
        self.time_remaining = max(0, seconds)
        self.frozen = False
        self.frozen_seconds_left = 0

    def freeze(self, seconds: int) -> None:
        """Pause the countdown for the given number of ticks."""
        self.frozen = seconds > 0
        self.frozen_seconds_left = max(0, seconds)

    def tick(self) -> bool:
        """
        Advance one second.

        Returns True when this tick brought the main countdown to zero.
        """
        if self.frozen:
            if self.frozen_seconds_left > 0:
                self.frozen_seconds_left -= 1
            if self.frozen_seconds_left == 0:
                self.frozen = False
            return False

        if self.time_remaining > 0:
            self.time_remaining -= 1
            return self.time_remaining == 0
        return False

    @property
    def expired(self) -> bool:
        """A frozen clock is not counting down, so it never reports expiry."""
        return self.time_remaining == 0 and not self.frozen
