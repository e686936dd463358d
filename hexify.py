import io
import itertools
import logging

from hexify_errors import SourceReadError
from hexify_format import Format, Line, format_line

log = logging.getLogger(__name__)


class IterSource:
    """Read adapter over an iterable of byte values."""

    def __init__(self, values):
        self.values = iter(values)

    def read(self, n):
        return bytes(itertools.islice(self.values, n))


def byte_source(data):
    if hasattr(data, 'read'):
        return data
    if isinstance(data, str):
        raise TypeError("hexify: text is not a byte source, encode it first")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return io.BytesIO(data)
    try:
        return IterSource(data)
    except TypeError:
        raise TypeError(f"hexify: {type(data).__name__} is not a byte source") from None


def read_source(source, n, offset):
    """One read from source; failures come out as SourceReadError."""
    try:
        data = source.read(n)
    except OSError as e:
        log.error("source read failed at offset %06x: %s", offset, e)
        raise SourceReadError(offset, e) from e
    if isinstance(data, str):
        raise TypeError("hexify: text stream is not a byte source, open it in binary mode or encode it first")
    return data


def check_offset(offset):
    if offset < 0:
        raise ValueError(f"hexify: offset must be non-negative, got {offset}")
    return offset


class Hexify:
    def __init__(self, fmt=None):
        self.format = Format.or_default(fmt)
        self.formatter = self.format.formatter()
        self.printables = list(map(self.printable, range(256)))
        self.hex = list(map("{:02x}".format, range(256)))
        # separators[i] goes after the (i+1)-th byte of a line
        self.separators = [
            ' ' * sum(1 for period in self.format.pack if period and n % period == 0)
            for n in range(1, self.format.size + 1)
        ]

    def printable(self, c):
        return chr(c) if 32 <= c < 127 else self.format.ascii_none

    def pull(self, source, offset):
        size = self.format.size
        chunk = b''
        while len(chunk) < size:
            data = read_source(source, size - len(chunk), offset)
            if not data:
                break
            chunk += data
        return chunk

    def hexify_chunk(self, chunk, offset):
        dump = "".join([self.hex[x] + self.separators[i] for i, x in enumerate(chunk)])
        char = None
        if self.format.ascii:
            char = "".join([self.printables[x] for x in chunk])
        return Line(offset, dump, char)

    def lines(self, data, offset=0):
        """Lazily yields Line records for data, one per `size` bytes."""
        return self._lines(byte_source(data), check_offset(offset))

    def _lines(self, source, offset):
        log.debug("dumping %r from offset %06x", self.format, offset)
        lines_n = bytes_n = 0
        while True:
            chunk = self.pull(source, offset)
            if not chunk:
                break
            yield self.hexify_chunk(chunk, offset)
            offset += self.format.size
            lines_n += 1
            bytes_n += len(chunk)
        log.debug("source exhausted after %d line(s), %d byte(s)", lines_n, bytes_n)

    def dump_lines(self, data, offset=0):
        for line in self.lines(data, offset):
            yield f"{self.formatter(line)}\n"

    def dump(self, data, offset=0):
        return "".join(self.dump_lines(data, offset))


def render(lines, fmt=None):
    """
    Formats every line record and joins them, one newline per line.

    fmt must be the Format the lines were produced with; None means the
    default Format, which pads the hex column for 16 byte lines.
    """
    fmt = Format.or_default(fmt)
    return "".join([f"{format_line(fmt, line)}\n" for line in lines])


def xxd(data, fmt=None, offset=0):
    """
    Returns a lazy iterator of Line(offset, hex, ascii) over data.

    data is a readable binary stream, a bytes-like object or an iterable of
    byte values; passing None as fmt uses the default Format.
    """
    return Hexify(fmt).lines(data, offset)


def xxd_str(data, fmt=None, offset=0):
    return Hexify(fmt).dump(data, offset)
