import pytest

from hexify_errors import HexifyError, InvalidConfig
from hexify_format import Format, Line, format_line, hex_column_width


def test_defaults():
    f = Format()
    assert f.size == 16
    assert f.pack == (2, 4, 8)
    assert f.ascii_none == '.'
    assert f.ascii is True
    assert f.gaps == (2, 2)
    assert f.hex_width == 43


def test_or_default():
    f = Format(size=9, pack=[3, 5], ascii_none='#', gaps=(2, 3))
    assert Format.or_default(f) is f
    assert f.pack == (3, 5)
    assert Format.or_default(None) == Format()


@pytest.mark.parametrize("size, pack, width", [
    (16, (2, 4, 8), 43),
    (16, (2, 4), 42),
    (16, (), 32),
    (16, (0, 2), 39),
    (9, (3, 5), 21),
    (1, (2, 4, 8), 2),
    (18, (3, 6), 36 + 5 + 2),
])
def test_hex_width(size, pack, width):
    assert hex_column_width(size, pack) == width
    assert Format(size=size, pack=pack).hex_width == width


@pytest.mark.parametrize("changes, field", [
    (dict(size=0), 'size'),
    (dict(size=-16), 'size'),
    (dict(size=1.5), 'size'),
    (dict(size=True), 'size'),
    (dict(pack=(2, -4)), 'pack'),
    (dict(pack=(2, 'x')), 'pack'),
    (dict(ascii_none=''), 'ascii_none'),
    (dict(ascii_none='..'), 'ascii_none'),
    (dict(gaps=(1,)), 'gaps'),
    (dict(gaps=(1, -2)), 'gaps'),
])
def test_invalid_config(changes, field):
    with pytest.raises(InvalidConfig) as e:
        Format(**changes)
    assert e.value.field == field
    assert isinstance(e.value, HexifyError)
    assert isinstance(e.value, ValueError)


def test_immutable():
    f = Format()
    with pytest.raises(AttributeError):
        f.size = 8


def test_replace():
    f = Format().replace(size=8, ascii=False)
    assert f.size == 8
    assert f.ascii is False
    assert f.hex_width == 16 + 3 + 1 + 0
    with pytest.raises(InvalidConfig):
        Format().replace(size=0)


def test_format_line():
    f = Format(size=16, pack=(2, 4), gaps=(1, 2))
    line = Line(0, '5b70 6163  6b61 6765  5d0a 6e61  6d65 203d  ', '[package].name =')
    assert format_line(f, line) == '000000: 5b70 6163  6b61 6765  5d0a 6e61  6d65 203d  [package].name ='


def test_format_short_line_is_padded():
    f = Format(size=16, pack=(2, 4), gaps=(1, 2))
    text = format_line(f, (0x80, '2022 2a22  ', ' "*"'))
    assert text == '000080: ' + '2022 2a22' + ' ' * 33 + '  ' + ' "*"'
    assert text.index('"*"') - text.index(':') == 1 + 42 + 2 + 1


def test_format_without_ascii():
    f = Format(ascii=False)
    assert format_line(f, Line(16, 'ab', None)) == '000010:  ab' + ' ' * 41


def test_format_wide_offset():
    f = Format(size=1, pack=(), gaps=(0, 0))
    assert format_line(f, Line(0x1234567, 'ff', '.')) == '1234567:ff.'


def test_formatter():
    f = Format(gaps=(4, 1))
    line = Line(32, '2a', '*')
    assert f.formatter()(line) == format_line(f, line)
