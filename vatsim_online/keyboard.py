"""Raw terminal key reading for the live dashboard (POSIX terminals)."""
import asyncio
import os
import select
import sys

from vatsim_online.scheduler import CLEAR, DOWN, OPEN, QUIT, UP

KEYMAP = {
    "\x1b[A": UP,
    "\x1b[B": DOWN,
    "k": UP,
    "j": DOWN,
    "o": OPEN,
    "O": OPEN,
    "\x1b": CLEAR,
    "q": QUIT,
    "Q": QUIT,
    "\x03": QUIT,
}


def decode_key(seq):
    """Map a raw key sequence to a named key, or None if it means nothing to us."""
    return KEYMAP.get(seq)


def _ready(fd, timeout):
    return bool(select.select([fd], [], [], timeout)[0])


def split_keys(text):
    """Break a chunk of terminal input into keys, keeping ``ESC [ x`` sequences whole."""
    keys = []
    i = 0
    while i < len(text):
        if text.startswith("\x1b[", i) and i + 2 < len(text):
            keys.append(text[i:i + 3])
            i += 3
        else:
            keys.append(text[i])
            i += 1
    return keys


def read_keys(fd):
    """
    Read whatever is waiting on ``fd`` and split it into keys.

    Reads the raw descriptor rather than ``sys.stdin``: a buffered text
    stream swallows the rest of an escape sequence, after which ``select``
    reports nothing left to read.
    """
    data = os.read(fd, 64)
    # an arrow key can arrive split across reads
    while data.endswith((b"\x1b", b"\x1b[")) and _ready(fd, 0.05):
        more = os.read(fd, 64)
        if not more:
            break
        data += more
    return split_keys(data.decode("utf-8", errors="replace"))


async def keyboard_task(keys, stream=None):
    """Push named keys onto ``keys`` until the task is cancelled or quit is pressed."""
    import termios
    import tty

    stream = stream or sys.stdin
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        while True:
            if _ready(fd, 0):
                for key in map(decode_key, read_keys(fd)):
                    if key is None:
                        continue
                    await keys.put(key)
                    if key == QUIT:
                        return
            await asyncio.sleep(0.05)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
