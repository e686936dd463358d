"""
Token driven dump.

The producer asks a tokenizer for every piece of a line: BLOCK_START once,
NEXT for each byte and BLOCK_END once. Any prefix text a tokenizer hands back
is written into both the hex and the ascii column, so a tokenizer can label,
mark or separate the bytes without the producer knowing what the text means.
"""
import enum
import logging
from typing import Optional, Protocol, Tuple

from hexify import Hexify, byte_source, check_offset, read_source, render
from hexify_format import Format, Line

log = logging.getLogger(__name__)


class Token(enum.Enum):
    BLOCK_START = 'block_start'
    NEXT = 'next'
    BLOCK_END = 'block_end'


class Tokenizer(Protocol):
    def get_token(self, token: Token) -> Optional[Tuple[Optional[str], Optional[int]]]:
        """
        Answers a token request with (prefix, byte), or None.

        The byte is ignored for BLOCK_START and BLOCK_END. For NEXT a missing
        byte ends the data for good.
        """
        ...


class TokenLines:
    def __init__(self, tokenizer: Tokenizer, fmt: Optional[Format] = None, offset: int = 0):
        self.tokenizer = tokenizer
        self.hexify = Hexify(fmt)
        self.format = self.hexify.format
        self.offset = check_offset(offset)
        self.end = False

    def __iter__(self):
        return self

    def prefix(self, token):
        answer = self.tokenizer.get_token(token)
        return answer[0] if answer is not None else None

    def __next__(self):
        if self.end:
            raise StopIteration

        hexed = []
        char = [] if self.format.ascii else None

        def write(text):
            if text is not None:
                hexed.append(text)
                if char is not None:
                    char.append(text)

        write(self.prefix(Token.BLOCK_START))

        any_byte = False
        for _ in range(self.format.size):
            answer = self.tokenizer.get_token(Token.NEXT)
            if answer is None or answer[1] is None:
                log.debug("tokenizer ran dry at offset %06x", self.offset)
                self.end = True
                break
            prefix, c = answer
            any_byte = True
            write(prefix)
            hexed.append(self.hexify.hex[c])
            if char is not None:
                char.append(self.hexify.printables[c])

        write(self.prefix(Token.BLOCK_END))

        if not any_byte:
            raise StopIteration

        line = Line(self.offset, "".join(hexed), None if char is None else "".join(char))
        self.offset += self.format.size
        return line


def xhex(tokenizer, fmt=None, offset=0):
    """Returns a lazy iterator of Line records built from tokenizer answers."""
    return TokenLines(tokenizer, fmt, offset)


def xhex_str(tokenizer, fmt=None, offset=0):
    fmt = Format.or_default(fmt)
    return render(xhex(tokenizer, fmt, offset), fmt)


class BytesTokenizer:
    """Serves the bytes of a source with no prefixes at all."""

    def __init__(self, data):
        self.source = byte_source(data)
        self.position = 0

    def get_token(self, token):
        if token is Token.NEXT:
            c = self.read_byte()
            if c is None:
                return None
            return self.mark(self.position - 1), c
        return self.block(token)

    def read_byte(self):
        data = read_source(self.source, 1, self.position)
        if not data:
            return None
        self.position += 1
        return data[0]

    def block(self, token):
        return None

    def mark(self, position):
        return None


class MarkTokenizer(BytesTokenizer):
    """
    Puts marks[position] in front of the byte at that absolute position and
    block_start / block_end around every line.

        >>> xhex_str(MarkTokenizer(b'abcd', {2: '|'}), Format(size=4, pack=(), gaps=(1, 1)))
        '000000: 6162|6364 ab|cd\\n'
    """

    def __init__(self, data, marks=None, block_start=None, block_end=None):
        super().__init__(data)
        self.marks = dict(marks or {})
        self.block_start = block_start
        self.block_end = block_end

    def block(self, token):
        prefix = self.block_start if token is Token.BLOCK_START else self.block_end
        return None if prefix is None else (prefix, None)

    def mark(self, position):
        return self.marks.get(position)
