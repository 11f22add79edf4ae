import pytest

from mpixel.cliargs import (
    COMMANDS,
    ArgumentError,
    CorrectionType,
    parse_black_level,
    parse_color_matrix,
    parse_debayer_size,
    parse_gamma,
    parse_kernel_size,
    parse_palette,
    parse_width,
    parse_width_height,
    parse_white_balance,
    split_commands,
    usage,
)
from mpixel.formats import PixelFormat


def test_split_commands_on_separator():
    argv = ["read", "a.qoi", "!", "convert", "RGB24", "!", "write", "b.bin"]
    assert split_commands(argv) == [["read", "a.qoi"], ["convert", "RGB24"], ["write", "b.bin"]]


def test_split_commands_trailing_separator_ignored():
    assert split_commands(["qoi_encode", "!"]) == [["qoi_encode"]]


def test_split_commands_empty_command_rejected():
    with pytest.raises(ArgumentError):
        split_commands(["!", "read", "x.qoi"])
    with pytest.raises(ArgumentError):
        split_commands(["read", "x.qoi", "!", "!", "write", "y"])


def test_split_commands_preserves_all_arguments():
    argv = ["correction", "white_balance", "1.5", "2", "!", "palettize"]
    parts = split_commands(argv)
    assert [a for part in parts for a in part] == [a for a in argv if a != "!"]


def test_parse_width_height():
    assert parse_width_height("640x480") == (640, 480)
    assert parse_width_height("65535x65535") == (65535, 65535)


@pytest.mark.parametrize("arg", ["640", "70000x10", "10x70000", "10x20z", "10*20"])
def test_parse_width_height_invalid(arg):
    with pytest.raises(ArgumentError):
        parse_width_height(arg)


def test_parse_width():
    assert parse_width("65535") == 65535
    assert parse_width("32") == 32


@pytest.mark.parametrize("arg", ["0", "65536", "abc", ""])
def test_parse_width_invalid(arg):
    with pytest.raises(ArgumentError):
        parse_width(arg)


@pytest.mark.parametrize("size", [3, 5])
def test_parse_kernel_size(size):
    assert parse_kernel_size(str(size)) == size


@pytest.mark.parametrize("arg", ["4", "3x", "", "7"])
def test_parse_kernel_size_invalid(arg):
    with pytest.raises(ArgumentError):
        parse_kernel_size(arg)


@pytest.mark.parametrize("size", [1, 2, 3])
def test_parse_debayer_size(size):
    assert parse_debayer_size(str(size)) == size


@pytest.mark.parametrize("arg", ["0", "4", "2a"])
def test_parse_debayer_size_invalid(arg):
    with pytest.raises(ArgumentError):
        parse_debayer_size(arg)


def test_parse_palette():
    assert parse_palette("4", "10") == (PixelFormat.PALETTE4, 10)
    assert parse_palette("8", "1000") == (PixelFormat.PALETTE8, 1000)
    assert parse_palette("1", "0") == (PixelFormat.PALETTE1, 0)


@pytest.mark.parametrize("depth,cycles", [("0", "1"), ("9", "1"), ("8", "1001"), ("4x", "1"), ("4", "")])
def test_parse_palette_invalid(depth, cycles):
    if cycles == "":
        # An empty count parses as zero cycles, as with the C library call.
        assert parse_palette(depth, cycles)[1] == 0
        return_value = parse_palette(depth, cycles)[0]
        assert return_value == PixelFormat.PALETTE4
    else:
        with pytest.raises(ArgumentError):
            parse_palette(depth, cycles)


def test_parse_black_level():
    assert parse_black_level("255") == 255
    assert parse_black_level("0") == 0


@pytest.mark.parametrize("arg", ["256", "", "12a"])
def test_parse_black_level_invalid(arg):
    with pytest.raises(ArgumentError):
        parse_black_level(arg)


def test_parse_white_balance_fixed_point():
    assert parse_white_balance("2", "1") == (2048, 1024)


@pytest.mark.parametrize("red,blue", [("", "1"), ("1", "x"), ("64", "1"), ("-1", "1"), ("1", "inf")])
def test_parse_white_balance_invalid(red, blue):
    with pytest.raises(ArgumentError):
        parse_white_balance(red, blue)


def test_parse_gamma_bounds():
    assert parse_gamma("1.0") == 255
    assert parse_gamma("0") == 17


@pytest.mark.parametrize("arg", ["1.5", "", "0.5x"])
def test_parse_gamma_invalid(arg):
    with pytest.raises(ArgumentError):
        parse_gamma(arg)


def test_parse_gamma_monotonic():
    values = [parse_gamma(f"{x / 10}") for x in range(11)]
    assert values == sorted(values)
    assert all(17 <= v <= 255 for v in values)


def test_parse_color_matrix_identity():
    args = ["1", "0", "0", "0", "1", "0", "0", "0", "1"]
    assert parse_color_matrix(args) == (1024, 0, 0, 0, 1024, 0, 0, 0, 1024)


def test_parse_color_matrix_negative_limit():
    levels = parse_color_matrix(["-32"] + ["0"] * 8)
    assert levels[0] == -32768


@pytest.mark.parametrize(
    "args",
    [["1"] * 8, ["1"] * 10, ["32"] + ["0"] * 8, [""] + ["0"] * 8, ["1a"] + ["0"] * 8],
)
def test_parse_color_matrix_invalid(args):
    with pytest.raises(ArgumentError):
        parse_color_matrix(args)


def test_correction_type_values():
    assert [t.value for t in CorrectionType] == [0, 1, 2, 3]
    assert CorrectionType(3) is CorrectionType.COLOR_MATRIX


def test_usage_lists_every_command():
    text = usage()
    lines = text.splitlines()
    assert lines[0] == "Available commands:"
    assert len(lines) == len(COMMANDS) + 1
    assert any(line.endswith("read <file> [<width> <format>] ! ...") for line in lines)
    assert any(line.endswith("... ! resize <type> <width>x<height> ! ...") for line in lines)
    for line in lines[1:]:
        assert "[-v]" in line