# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2024/10/12 22:51:09
# @Author : Kariko Lin

from .abstract import EOF, CharStream


def read_line(stream: CharStream) -> str | None:
    """Read up to (and consume) the next `\\n`, which is not returned.

    Returns `None` once the stream is exhausted with nothing read.
    """
    buf: list[str] = []
    while (ch := stream.getc()) != EOF:
        if ch == '\n':
            break
        buf.append(ch)
    else:
        if not buf:
            return None
    if buf and buf[-1] == '\r':  # CRLF
        buf.pop()
    return ''.join(buf)


def write_line(stream: CharStream, text: str | None) -> None:
    if text is None:
        return
    for ch in text:
        stream.putc(ch)
    stream.putc('\n')
