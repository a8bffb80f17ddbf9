"""The bike record and the timing of a single rental."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class Bike:
    """A rentable bike and the timing state of its current rental."""

    brand: str
    model: str
    bike_id: int
    bike_type: str
    frame_size: str
    rate: float
    mileage: float = 0.0
    available: bool = True

    # Seconds accumulated by earlier sessions of the program.
    previous_time: float = field(default=0.0, init=False)
    last_shutdown_time: int = field(default=0, init=False)
    restart_time: int = field(default=0, init=False)
    offline_period: float = field(default=0.0, init=False)
    rent_started: float | None = field(default=None, init=False, repr=False)

    _count: ClassVar[int] = 0

    def __post_init__(self) -> None:
        Bike._count += 1

    @staticmethod
    def total_bikes() -> int:
        """Number of bikes created so far."""
        return Bike._count

    def start_renting(self) -> None:
        """Start the rental clock and mark the bike as rented."""
        self.rent_started = time.monotonic()
        self.available = False

    def current_duration(self) -> float:
        """Whole seconds elapsed since the rental clock was started."""
        if self.rent_started is None:
            return 0.0
        return float(int(time.monotonic() - self.rent_started))

    def mark_returned(self) -> None:
        """Mark the bike as available again."""
        self.available = True

    def add_mileage(self, km: float) -> None:
        """Add ridden kilometres to the bike's total."""
        self.mileage += km

    def record_shutdown_time(self) -> None:
        """Remember the wall-clock second at which the program stops."""
        self.last_shutdown_time = int(time.time())

    def record_restart_time(self) -> None:
        """Remember the restart second and add the time spent offline."""
        self.restart_time = int(time.time())
        if self.last_shutdown_time > 0:
            self.offline_period += self.restart_time - self.last_shutdown_time

    def reset_rented_state(self) -> None:
        """Clear all timing carried over from earlier sessions."""
        self.previous_time = 0.0
        self.offline_period = 0.0
        self.last_shutdown_time = 0
        self.restart_time = 0