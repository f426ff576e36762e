"""Loading of RIFF/WAVE sound files into raw PCM buffers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

_CHUNK_HEADER = struct.Struct("<4si")
_RIFF_TYPE = struct.Struct("<4s")
_WAVE_FORMAT = struct.Struct("<HHIIHHH")


class WaveFormatError(ValueError):
    """Raised when data is not a well-formed RIFF/WAVE stream."""


@dataclass(frozen=True)
class WaveFormat:
    """The waveform description from a ``fmt `` chunk."""

    format_tag: int = 0
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    cb_size: int = 0

    @classmethod
    def from_bytes(cls, body: bytes) -> WaveFormat:
        """Decode a format chunk body; fields it does not reach are zero."""
        if len(body) > _WAVE_FORMAT.size:
            raise WaveFormatError(
                f"format chunk of {len(body)} bytes exceeds {_WAVE_FORMAT.size}"
            )
        padded = body.ljust(_WAVE_FORMAT.size, b"\0")
        return cls(*_WAVE_FORMAT.unpack(padded))


@dataclass
class SoundData:
    """A decoded wave: its format and its sample bytes."""

    wave_format: WaveFormat = field(default_factory=WaveFormat)
    buffer: bytes = b""

    @property
    def buffer_size(self) -> int:
        """Number of sample bytes held."""
        return len(self.buffer)

    def unload(self) -> None:
        """Release the samples and reset the format."""
        self.buffer = b""
        self.wave_format = WaveFormat()


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def read(self, size: int, what: str) -> bytes:
        end = self._pos + size
        if size < 0 or end > len(self._data):
            raise WaveFormatError(f"unexpected end of data while reading {what}")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def skip(self, size: int, what: str) -> None:
        self.read(size, what)

    def chunk_header(self, what: str) -> tuple[bytes, int]:
        chunk_id, size = _CHUNK_HEADER.unpack(self.read(_CHUNK_HEADER.size, what))
        if size < 0:
            raise WaveFormatError(f"negative size in {what}")
        return chunk_id, size


def parse_wave(data: bytes) -> SoundData:
    """Decode a RIFF/WAVE byte string, skipping chunks other than ``fmt `` and ``data``."""
    reader = _Reader(bytes(data))

    riff_id, _ = reader.chunk_header("RIFF header")
    if riff_id != b"RIFF":
        raise WaveFormatError("not a RIFF file")
    (riff_type,) = _RIFF_TYPE.unpack(reader.read(_RIFF_TYPE.size, "RIFF type"))
    if riff_type != b"WAVE":
        raise WaveFormatError("RIFF type is not WAVE")

    fmt_id, fmt_size = reader.chunk_header("format chunk header")
    if fmt_id != b"fmt ":
        raise WaveFormatError("format chunk not found")
    wave_format = WaveFormat.from_bytes(reader.read(fmt_size, "format chunk"))

    chunk_id, size = reader.chunk_header("chunk header")
    while chunk_id != b"data":
        reader.skip(size, f"{chunk_id!r} chunk")
        chunk_id, size = reader.chunk_header("chunk header")

    return SoundData(wave_format=wave_format, buffer=reader.read(size, "data chunk"))


def load_wave(path: Union[str, PathLike]) -> SoundData:
    """Read and decode a ``.wav`` file."""
    with open(path, "rb") as handle:
        return parse_wave(handle.read())