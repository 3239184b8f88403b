import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, TypeAlias, overload

from typing_extensions import override

from steprange.util import (
    DEFAULT_STOP,
    check_float_mix,
    check_number,
    grid_tolerance,
    is_finite_real,
    is_rational,
)

Number: TypeAlias = int | float | Fraction

_ARG_NAMES: dict[int, tuple[str, ...]] = {
    0: (),
    1: ("stop",),
    2: ("start", "stop"),
    3: ("start", "stop", "step"),
}


def _count(start: Number, stop: Number, stride: Number) -> int:
    """Number of grid points from start up to and including stop.

    Counts whole steps instead of accumulating, so float ranges do not drift.
    A step count is only rounded up when the value it reaches stays within
    stop.

    Raises:
        OverflowError: If the number of steps is too large for a float
    """
    if is_rational(start, stop, stride):
        steps = (stop - start) // stride
        return max(int(steps) + 1, 0)

    ratio = (stop - start) / stride
    if not math.isfinite(ratio):
        raise OverflowError(
            f"Range({start!r}, {stop!r}, {stride!r}) has too many values to count.\n"
            f"Hint: use a larger step or narrower bounds"
        )
    steps = math.floor(ratio)
    nearest = round(ratio)
    if nearest > steps and nearest - ratio <= grid_tolerance(
        start, stop, stride, ratio
    ):
        terminal = start + nearest * stride
        if terminal <= stop if stride > 0 else terminal >= stop:
            steps = nearest
    return max(steps + 1, 0)


def _as_position(index: Any) -> int | None:
    """Coerce an index to int, or None if it is not a whole number."""
    if isinstance(index, bool):
        return None
    if isinstance(index, int):
        return index
    if isinstance(index, (float, Fraction)) and is_finite_real(index):
        if index == int(index):
            return int(index)
    return None


@dataclass(frozen=True)
class Range(Sequence[Any]):
    """Inclusive arithmetic sequence of numbers.

    Values run from ``start`` towards ``stop`` in increments of ``stride``
    and are produced on demand; nothing is materialized. A stride that
    points away from ``stop`` gives an empty range.

    Call shapes mirror the builtin ``range`` except that ``stop`` is
    inclusive::

        Range()            # 0..DEFAULT_STOP
        Range(5)           # 0, 1, 2, 3, 4, 5
        Range(1, 5)        # 1, 2, 3, 4, 5
        Range(1, 10, 2)    # 1, 3, 5, 7, 9
        Range(10, 1, -1)   # 10, 9, ..., 1
    """

    start: Number
    stop: Number
    stride: Number
    size: int = field(compare=False)

    @overload
    def __init__(self) -> None: ...

    @overload
    def __init__(self, stop: Number, /) -> None: ...

    @overload
    def __init__(self, start: Number, stop: Number, /) -> None: ...

    @overload
    def __init__(self, start: Number, stop: Number, step: Number, /) -> None: ...

    def __init__(self, *args: Number) -> None:
        if len(args) > 3:
            raise TypeError(
                f"Range expected at most 3 arguments, got {len(args)}.\n"
                f"Usage: Range(), Range(stop), Range(start, stop), "
                f"Range(start, stop, step)"
            )
        for name, value in zip(_ARG_NAMES[len(args)], args):
            check_number(value, name)

        start: Number = 0
        stop: Number = DEFAULT_STOP
        stride: Number = 1
        if len(args) == 1:
            (stop,) = args
        elif len(args) == 2:
            start, stop = args
        elif len(args) == 3:
            start, stop, stride = args

        if stride == 0:
            raise ValueError(
                f"Range step must be nonzero, got {stride!r}.\n"
                f"Hint: use a negative step to count down, e.g. Range(10, 1, -1)"
            )
        check_float_mix({"start": start, "stop": stop, "step": stride})

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "stop", stop)
        object.__setattr__(self, "stride", stride)
        object.__setattr__(self, "size", _count(start, stop, stride))

    def __str__(self) -> str:
        """Human-friendly string showing the bounds actually reached."""
        if not self.size:
            return f"Range({self.start}→{self.stop} by {self.stride}, empty)"
        return f"Range({self.start}→{self.last} by {self.stride}, {self.size} values)"

    @property
    def last(self) -> Number | None:
        """Terminal value of the sequence, or None when the range is empty.

        Differs from ``stop`` when stop is not a whole number of steps
        away from start.
        """
        if not self.size:
            return None
        return self.step(self.size - 1)

    def step(self, index: int) -> Number:
        """Return the value at zero-based ``index``.

        Raises:
            IndexError: If index is not a whole number in [0, size - 1]
        """
        position = _as_position(index)
        if position is None or not 0 <= position < self.size:
            raise IndexError(
                f"Invalid index {index!r} for a range of {self.size} values"
            )
        return self.start + position * self.stride

    def _position(self, value: Any) -> int | None:
        """Grid position of value, or None when value is off the grid."""
        if not self.size or not is_finite_real(value):
            return None

        if is_rational(self.start, self.stride, value):
            offset = value - self.start
            if offset % self.stride:
                return None
            position = int(offset // self.stride)
        else:
            try:
                ratio = (value - self.start) / self.stride
            except OverflowError:
                # integer too large to mix with a float grid
                return None
            if not math.isfinite(ratio):
                return None
            position = round(ratio)
            if abs(ratio - position) > grid_tolerance(
                self.start, value, self.stride, ratio
            ):
                return None

        if 0 <= position < self.size:
            return position
        return None

    def in_range(self, value: Any) -> bool:
        """True if value is one of the values this range produces."""
        return self._position(value) is not None

    def index_of(self, value: Any) -> int:
        """Return the position of value in the sequence.

        Raises:
            ValueError: If value is not in the range
        """
        position = self._position(value)
        if position is None:
            raise ValueError(f"{value!r} is not in range {self}")
        return position

    @override
    def __len__(self) -> int:
        return self.size

    @override
    def __iter__(self) -> Iterator[Number]:
        start, stride = self.start, self.stride
        for position in range(self.size):
            yield start + position * stride

    @override
    def __contains__(self, value: object) -> bool:
        return self.in_range(value)

    @overload
    def __getitem__(self, index: int) -> Number: ...

    @overload
    def __getitem__(self, index: slice) -> "Range": ...

    @override
    def __getitem__(self, index: int | slice) -> "Number | Range":
        if isinstance(index, slice):
            return self._slice(index)
        position = _as_position(index)
        if position is not None and position < 0:
            position += self.size
            if position >= 0:
                return self.step(position)
        return self.step(index)

    def _slice(self, item: slice) -> "Range":
        positions = range(*item.indices(self.size))
        stride = self.stride * positions.step
        if not positions:
            return Range(self.start, self.start - stride, stride)
        first = self.step(positions[0])
        # stop is the slice's own last value
        return Range(first, first + (len(positions) - 1) * stride, stride)

    @override
    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        position = self.index_of(value)
        lower, upper, _ = slice(start, stop).indices(self.size)
        if not lower <= position < upper:
            raise ValueError(f"{value!r} is not in range {self}[{start}:{stop}]")
        return position

    @override
    def count(self, value: Any) -> int:
        return int(self.in_range(value))


def span(
    *, start: Number = 0, stop: Number = DEFAULT_STOP, step: Number = 1
) -> Range:
    """Build a Range from explicitly named bounds.

    Equivalent to ``Range(start, stop, step)``; useful when only some of the
    fields differ from their defaults.

    Example:
        >>> list(span(stop=3))
        [0, 1, 2, 3]
        >>> list(span(start=1, stop=2, step=0.5))
        [1.0, 1.5, 2.0]
    """
    return Range(start, stop, step)
