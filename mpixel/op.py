"""One processing step of a line-based image pipeline."""

from __future__ import annotations

from typing import Iterable

from mpixel import port
from mpixel.formats import bits_per_pixel
from mpixel.ring import Ring
from mpixel.utils import BITS_PER_BYTE

__all__ = ["Operation", "find_by_format"]


class Operation:
    """A pipeline step reading from its own input ring and writing to the next step.

    Operations are chained through ``next``. The last operation of a chain is a
    sink: it does not run, and its ring keeps the output of the pipeline.

    The base ``step`` copies one line of input to the output; subclasses
    override it to perform their own processing.
    """

    def __init__(
        self,
        name: str,
        fourcc_src: int,
        fourcc_dst: int,
        width: int,
        height: int,
        window_size: int,
        threshold: int,
        ring_size: int,
    ) -> None:
        self.name = name
        self.fourcc_src = fourcc_src
        self.fourcc_dst = fourcc_dst
        self.width = width
        self.height = height
        self.window_size = window_size
        self.threshold = threshold
        self.ring = Ring(ring_size)
        self.next: Operation | None = None
        self.line_offset = 0
        self.start_time_us = 0
        self.total_time_us = 0

    def __repr__(self) -> str:
        return (
            f"Operation({self.name!r}, {self.width}x{self.height}, "
            f"line {self.line_offset})"
        )

    def pitch(self) -> int:
        """Bytes in one input line, or 0 for variable-pitch formats."""
        return self.width * bits_per_pixel(self.fourcc_src) // BITS_PER_BYTE

    def _next_op(self) -> Operation:
        if self.next is None:
            raise RuntimeError(
                f"operation {self.name!r} has no next operation to output to"
            )
        return self.next

    def get_input_bytes(self, size: int) -> bytes:
        """Consume size bytes of input."""
        return self.ring.read(size)

    def put_output_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Append processed bytes to the input of the next operation."""
        self._next_op().ring.write(data)

    def peek_input_bytes(self, size: int) -> bytes:
        """Look ahead at the next size bytes of input without consuming them."""
        return self.ring.peek(size)

    def get_input_lines(self, num: int) -> bytes:
        """Consume num lines of input."""
        self.line_offset += num
        return self.get_input_bytes(self.pitch() * num)

    def get_input_line(self) -> bytes:
        """Consume one line of input."""
        self.line_offset += 1
        return self.get_input_bytes(self.pitch())

    def peek_input_line(self) -> bytes:
        """Look ahead at the next line of input without consuming it."""
        return self.peek_input_bytes(self.pitch())

    def get_all_input(self) -> bytes:
        """Consume all the contiguous input currently available."""
        return self.ring.read(self.ring.tailroom())

    def output_headroom(self) -> int:
        """Number of contiguous bytes that can be written to the next operation."""
        return self._next_op().ring.headroom()

    def step(self) -> None:
        """Process one cycle of input: here, pass one line through unchanged."""
        self.put_output_bytes(self.get_input_line())
        self.done()

    def run(self) -> None:
        """Run steps while enough input is buffered and lines remain; sinks do nothing."""
        if self.next is None:
            return
        self.start_time_us = port.uptime_us()
        while self.ring.total_used() >= self.threshold and self.line_offset < self.height:
            self.step()

    def done(self) -> None:
        """Mark the output as ready and let the next operation process it."""
        stop_time_us = port.uptime_us()
        self.total_time_us += (stop_time_us - self.start_time_us) & 0xFFFFFFFF
        if self.next is not None:
            self.next.run()
        self.start_time_us = port.uptime_us()


def find_by_format(
    ops: Iterable[Operation], fourcc_src: int, fourcc_dst: int
) -> Operation | None:
    """Return the first operation converting fourcc_src into fourcc_dst, or None."""
    return next(
        (op for op in ops if op.fourcc_src == fourcc_src and op.fourcc_dst == fourcc_dst),
        None,
    )