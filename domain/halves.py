"""
Domain: half-hour slots and day windows.

Contract excerpts implemented here:
- A "half" counts half-hour increments since local midnight:
  0 = 00:00, 1 = 00:30, ..., 47 = 23:30.
- Valid halves are integers in [0, 47]; the ring wraps at 48.
- A window (start, end) is half-open: start is inside, end is outside.
- start == end is an empty window; nothing is ever inside it.
- end < start means the window crosses midnight:
  inside iff since_midnight < end OR since_midnight >= start.

Windows are never cross-validated against each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .errors import InvalidArgumentError

HALVES_PER_DAY = 48
MIN_HALVES = 0
MAX_HALVES = HALVES_PER_DAY - 1


def validate_halves(name: str, value: int) -> None:
    """
    Enforce that a boundary is a half-hour slot in [0, 47].

    bool is rejected even though it is an int subclass; True/False are never
    meaningful boundaries.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer number of halves, got {value!r}")
    if value < MIN_HALVES or value > MAX_HALVES:
        raise InvalidArgumentError(
            f"{name} must be between {MIN_HALVES} and {MAX_HALVES} (23:30), got {value}"
        )


def in_window(start: int, end: int, since_midnight: int) -> bool:
    """
    Cyclic half-open membership test over the 48-slot ring.

    since_midnight is not range checked; out-of-range input falls into
    whichever branch the comparisons select.
    """

    if start == end:
        return False

    if end > start:
        return start <= since_midnight < end

    # crosses midnight
    return since_midnight < end or since_midnight >= start


def halves_since_midnight(local: datetime) -> int:
    """Slot of a wall-clock time: 09:00 -> 18, 09:29 -> 18, 09:30 -> 19."""

    return local.hour * 2 + (1 if local.minute >= 30 else 0)


def format_halves(halves: int) -> str:
    validate_halves("halves", halves)
    return f"{halves // 2:02d}:{30 if halves % 2 else 0:02d}"


@dataclass(frozen=True, slots=True)
class HalfHourWindow:
    """
    Value object for a configured day window (work day, civil day).

    Both ends are validated; their order is not, since a window may wrap past
    midnight.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        validate_halves("start", self.start)
        validate_halves("end", self.end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def wraps_midnight(self) -> bool:
        return self.end < self.start

    @property
    def length(self) -> int:
        """Number of slots inside the window."""
        return (self.end - self.start) % HALVES_PER_DAY

    def contains(self, since_midnight: int) -> bool:
        return in_window(self.start, self.end, since_midnight)

    def __str__(self) -> str:
        return f"{format_halves(self.start)}-{format_halves(self.end)}"
