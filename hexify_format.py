"""
Format configuration of the dump and rendering of a single line.

    000000: 5b70 6163  6b61 6765  5d0a 6e61  6d65 203d  [package].name =

offset, colon, gaps[0] spaces, the hex column padded to hex_width, gaps[1]
spaces and the ascii column.
"""
import dataclasses
import functools
from typing import NamedTuple, Optional, Tuple

from hexify_errors import InvalidConfig


class Line(NamedTuple):
    offset: int
    hex: str
    ascii: Optional[str]


@dataclasses.dataclass(frozen=True)
class Format:
    # Bytes per line.
    size: int = 16
    # Grouping periods: after every pack[k]-th byte one space goes into the
    # hex text. Periods are independent and zero is ignored.
    pack: Tuple[int, ...] = (2, 4, 8)
    # Shown in the ascii column for bytes outside 32..126.
    ascii_none: str = '.'
    ascii: bool = True
    # offset{gaps[0]}hex{gaps[1]}ascii
    gaps: Tuple[int, int] = (2, 2)
    hex_width: int = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise InvalidConfig('size', f"must be a positive integer, got {self.size!r}")

        pack = tuple(self.pack)
        for period in pack:
            if isinstance(period, bool) or not isinstance(period, int) or period < 0:
                raise InvalidConfig('pack', f"periods must be non-negative integers, got {period!r}")

        if not isinstance(self.ascii_none, str) or len(self.ascii_none) != 1:
            raise InvalidConfig('ascii_none', f"must be a single character, got {self.ascii_none!r}")

        gaps = tuple(self.gaps)
        if len(gaps) != 2 or any(not isinstance(g, int) or g < 0 for g in gaps):
            raise InvalidConfig('gaps', f"must be two non-negative integers, got {self.gaps!r}")

        object.__setattr__(self, 'pack', pack)
        object.__setattr__(self, 'gaps', gaps)
        object.__setattr__(self, 'ascii', bool(self.ascii))
        object.__setattr__(self, 'hex_width', hex_column_width(self.size, pack))

    @classmethod
    def or_default(cls, fmt=None):
        return cls() if fmt is None else fmt

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    def formatter(self):
        """Returns a callable rendering one line with this format."""
        return functools.partial(format_line, self)


def hex_column_width(size, pack):
    """
    Width of the hex column for a full line.

    Every byte takes two digits and every non-zero period adds one space per
    boundary inside the line; the boundary after the last byte is not counted.
    """
    return size * 2 + sum((size - 1) // period for period in pack if period)


def format_line(fmt, line):
    offset, hexed, text = line
    head = f"{offset:06x}:{' ' * fmt.gaps[0]}{hexed.strip():<{fmt.hex_width}}"
    if text is None:
        return head
    return f"{head}{' ' * fmt.gaps[1]}{text}"
