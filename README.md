# mpixel

Building blocks for processing images line by line, the way a small
camera pipeline does: pixel formats identified by four-character codes,
a ring buffer that sits between processing steps, an operation base that
pulls lines out of one ring and pushes results into the next, and the
argument parsing used by a `!`-separated command pipeline.

The package has no dependencies outside the Python standard library and
supports Python 3.10 and later.

## Modules

| Module            | What it holds                                                                          |
|-------------------|----------------------------------------------------------------------------------------|
| `mpixel.formats`  | `PixelFormat`, `fourcc`, `fourcc_to_str`, `bits_per_pixel`, `register_bits_per_pixel`  |
| `mpixel.utils`    | `clamp`, `in_range`, `log2`, `bswap16`, `bswap32`, `bswap64`, `LOG_LEVEL`              |
| `mpixel.port`     | `uptime_us`, `init_exposure`, `set_exposure` and the `log_*` helpers                   |
| `mpixel.ring`     | `Ring` and `RingError`                                                                 |
| `mpixel.op`       | `Operation` and `find_by_format`                                                       |
| `mpixel.kinds`    | `KernelType`, `ResizeType` and `lookup_value`                                          |
| `mpixel.cliargs`  | `split_commands`, the `parse_*` functions, `CorrectionType`, `COMMANDS`, `usage`       |

## Pixel formats

A format is a 32-bit four-character code, packed little-endian: the first
character in the lowest byte.

```python
from mpixel.formats import PixelFormat, fourcc, fourcc_to_str, bits_per_pixel

rgb24 = fourcc("R", "G", "B", "3")
rgb24 == PixelFormat.RGB24   # True
fourcc_to_str(rgb24)         # "RGB3"
bits_per_pixel(rgb24)        # 24
```

Compressed formats (`PixelFormat.JPEG`, `PixelFormat.QOI`) report zero
bits per pixel. Formats that are not built in can be declared with
`register_bits_per_pixel`; asking `bits_per_pixel` about a format that
is neither built in nor registered raises `ValueError`.

## Ring buffers

`Ring` stores the bytes travelling between two operations. Data is
written at the head, read from the tail, and can be looked at ahead of
the tail with `peek` without consuming it.

```python
from mpixel.ring import Ring

ring = Ring(8)
ring.write(b"abcd")
ring.total_used()   # 4
ring.peek(2)        # b"ab", still in the ring
ring.read(4)        # b"abcd"
ring.is_empty()     # True
```

Reads, writes and peeks never wrap around the end of the storage:
`headroom`, `tailroom` and `peekroom` give the contiguous space available
for the next write, read or peek. Asking for more than is available
raises `RingError`.

## Operations

`Operation` is one step of a pipeline. It owns the ring holding its
input, knows its source and destination formats, the image size, how
many lines of context it needs (`window_size`) and how many buffered
bytes it needs before it can run (`threshold`). Operations are chained
through their `next` attribute; the last one of a chain is a sink whose
ring keeps the output.

`run` keeps calling `step` while enough input is buffered and lines
remain, and `done` hands fresh output to the next operation and runs it.
The base `step` passes one line through unchanged; subclasses override
it to do their own processing.

```python
from mpixel.formats import PixelFormat
from mpixel.op import Operation

fmt = PixelFormat.RGB24
copy = Operation("copy", fmt, fmt, 2, 2, 1, 6, 12)
sink = Operation("sink", fmt, fmt, 2, 2, 1, 6, 12)
copy.next = sink

copy.ring.write(bytes(range(12)))
copy.run()
sink.ring.read(12)   # the 12 input bytes, line by line
```

`find_by_format` picks, from a list of operations, the first one
converting between two given formats, or returns `None`.

## Host services and logging

`mpixel.port` gives a 32-bit wrapping microsecond clock (`uptime_us`)
and exposure control stubs: `init_exposure(dev)` returns the default and
maximum levels `(0, 1)`, and `set_exposure` only records the value, as
there is no sensor to drive. `log_error`, `log_warning`, `log_info` and
`log_debug` write tagged messages to standard error when
`mpixel.utils.LOG_LEVEL` is high enough (0 silent, 1 errors up to 4
debug). The level defaults to 3 and is read from the `MPIXEL_LOG_LEVEL`
environment variable.

## Command pipelines

The helpers in `mpixel.cliargs` parse a command line made of commands
separated by `!`:

```python
from mpixel.cliargs import split_commands, parse_width_height, parse_palette

split_commands(["read", "in.qoi", "!", "resize", "subsampling", "64x48"])
# [["read", "in.qoi"], ["resize", "subsampling", "64x48"]]
parse_width_height("64x48")   # (64, 48)
parse_palette("4", "10")      # (PixelFormat.PALETTE4, 10)
```

There are parsers for kernel sizes (3 or 5), debayer sizes (1, 2 or 3),
black level, white balance gains, gamma and 3x3 color matrices; invalid
values raise `ArgumentError`. Names such as kernel or resize types are
resolved with `mpixel.kinds.lookup_value`, which accepts an enum class,
a mapping or a list of `(name, value)` pairs. `usage()` returns the list
of commands in `COMMANDS` with their syntax.

## What the package does not do

The package provides the pieces of a pipeline, not the image operations
themselves: there are no format converters, debayering, kernels,
resizing, palettes, corrections, or JPEG or QOI encoders, and no
installed command. `cliargs` parses and checks the arguments of the
pipeline commands but does not execute them.

## Running the tests

Install the package with its `test` extra and run pytest from the
project directory.