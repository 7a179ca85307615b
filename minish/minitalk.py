"""Send text between processes one bit at a time with SIGUSR1 and SIGUSR2.

A message is framed as a 64-bit big-endian byte count followed by the bytes
of the message, most significant bit first. SIGUSR1 carries a 0 bit and
SIGUSR2 a 1 bit. The server answers a complete message with SIGUSR1.
"""

from __future__ import annotations

import os
import re
import signal
import sys
import time
from collections.abc import Sequence

LENGTH_BITS = 64
CHAR_BITS = 8
DEFAULT_DELAY = 0.0003
_LENGTH_MASK = (1 << LENGTH_BITS) - 1
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does; 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _as_bytes(message: str | bytes) -> bytes:
    if isinstance(message, bytes):
        return message
    return message.encode("utf-8", errors="surrogateescape")


def encode_message(message: str | bytes) -> list[int]:
    """Return the bits that carry ``message``, length header first."""
    data = _as_bytes(message)
    length = len(data) & _LENGTH_MASK
    bits = [(length >> shift) & 1 for shift in range(LENGTH_BITS - 1, -1, -1)]
    for byte in data:
        bits.extend((byte >> shift) & 1 for shift in range(CHAR_BITS - 1, -1, -1))
    return bits


class MessageDecoder:
    """Rebuild messages from bits received one at a time."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop any partly received message."""
        self.length = 0
        self._bits = 0
        self._char = 0
        self._data: bytearray | None = None

    def feed(self, bit: int) -> bytes | None:
        """Take one bit; return the message once its last bit has arrived."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, not {bit!r}")
        if self._data is None:
            self.length = ((self.length << 1) | bit) & _LENGTH_MASK
            self._bits += 1
            if self._bits < LENGTH_BITS:
                return None
            self._bits = 0
            self._data = bytearray()
            return self._finish() if self.length == 0 else None
        self._char = ((self._char << 1) | bit) & 0xFF
        self._bits += 1
        if self._bits == CHAR_BITS:
            self._data.append(self._char)
            self._bits = 0
            self._char = 0
            if len(self._data) == self.length:
                return self._finish()
        return None

    def _finish(self) -> bytes:
        message = bytes(self._data or b"")
        self.reset()
        return message


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Signal ``message`` to process ``pid``, pausing ``delay`` seconds per bit.

    Raises ValueError for a pid that is not positive and ProcessLookupError
    when the process cannot be reached.
    """
    if pid <= 0:
        raise ValueError(f"invalid pid {pid}")
    for bit in encode_message(message):
        try:
            os.kill(pid, 0)
        except OSError as exc:
            raise ProcessLookupError(f"invalid or unreachable pid {pid}") from exc
        os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        if delay:
            time.sleep(delay)


def client_main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``SERVER_PID MESSAGE``; waits for the server's answer."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 0
    ack = {signal.SIGUSR1}
    signal.pthread_sigmask(signal.SIG_BLOCK, ack)
    try:
        send_message(parse_int(args[0]), args[1])
        signal.sigwait(ack)
        print("Message reçu par le serveur", flush=True)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        signal.pthread_sigmask(signal.SIG_UNBLOCK, ack)
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    """Command entry: print the pid, then print every message received."""
    del argv
    print(os.getpid(), flush=True)
    bit_signals = {signal.SIGUSR1, signal.SIGUSR2}
    signal.pthread_sigmask(signal.SIG_BLOCK, bit_signals)
    decoder = MessageDecoder()
    try:
        while True:
            info = signal.sigwaitinfo(bit_signals)
            message = decoder.feed(0 if info.si_signo == signal.SIGUSR1 else 1)
            if message is None:
                continue
            print(message.decode("utf-8", errors="replace"), flush=True)
            try:
                os.kill(info.si_pid, signal.SIGUSR1)
            except OSError:
                pass
    except KeyboardInterrupt:
        return 0
    finally:
        signal.pthread_sigmask(signal.SIG_UNBLOCK, bit_signals)


if __name__ == "__main__":
    sys.exit(client_main())