"""File transfer over a 16550-style serial console using a simple byte protocol."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import BinaryIO, Optional, Union

UART_PROGNAME = "IOb-UART"


class Command(IntEnum):
    """Control bytes of the console protocol."""

    STX = 2  # start text
    ETX = 3  # end text
    EOT = 4  # end of transmission
    ENQ = 5  # enquiry
    ACK = 6  # acknowledge
    FTX = 7  # transmit file
    FRX = 8  # receive file


Text = Union[str, bytes]


def _to_bytes(s: Text) -> bytes:
    return s.encode() if isinstance(s, str) else bytes(s)


class Uart16550:
    """Serial console over any binary stream with ``read`` and ``write``."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    @classmethod
    def open(cls, device_path: Union[str, "os.PathLike[str]"]) -> "Uart16550":
        """Open a serial device (or any file) for reading and writing."""
        return cls(open(device_path, "r+b", buffering=0))

    def _write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written: Optional[int] = self.stream.write(view)
            if written is None:
                continue
            view = view[written:]

    def putc(self, c: Union[int, Text]) -> None:
        """Send one byte."""
        if isinstance(c, int):
            value = c & 0xFF
        else:
            raw = _to_bytes(c)
            if len(raw) != 1:
                raise ValueError("putc takes exactly one character")
            value = raw[0]
        self._write(bytes([value]))

    def getc(self) -> int:
        """Receive one byte; raises EOFError if the stream has ended."""
        data = self.stream.read(1)
        if not data:
            raise EOFError("serial stream ended")
        return data[0]

    def _read_exact(self, n: int) -> bytes:
        return bytes(self.getc() for _ in range(n))

    def puts(self, s: Text) -> None:
        """Send a string, stopping at the first NUL and not sending it."""
        self._write(_to_bytes(s).split(b"\0", 1)[0])

    def sendstr(self, name: Text) -> None:
        """Send a string followed by its NUL terminator."""
        self._write(_to_bytes(name).split(b"\0", 1)[0] + b"\0")

    def recvfile(self, file_name: Text) -> bytes:
        """Request ``file_name`` from the host and return its contents."""
        self.puts(UART_PROGNAME)
        self.puts(": requesting to receive file\n")
        self.putc(Command.FRX)
        self.sendstr(file_name)

        file_size = int.from_bytes(self._read_exact(4), "little")

        self.putc(Command.ACK)
        data = self._read_exact(file_size)

        self.puts(UART_PROGNAME)
        self.puts(": file received\n")
        return data

    def sendfile(self, file_name: Text, data: bytes) -> None:
        """Send ``data`` to the host to be stored as ``file_name``."""
        data = bytes(data)
        self.puts(UART_PROGNAME)
        self.puts(": requesting to send file\n")
        self.putc(Command.FTX)
        self.sendstr(file_name)
        self._write((len(data) & 0xFFFFFFFF).to_bytes(4, "little"))
        self._write(data)
        self.puts(UART_PROGNAME)
        self.puts(": file sent\n")

    def finish(self) -> None:
        """Send end-of-transmission and close the stream."""
        try:
            self.putc(Command.EOT)
        finally:
            self.stream.close()

    def __enter__(self) -> "Uart16550":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()