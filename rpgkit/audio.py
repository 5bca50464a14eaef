"""Audio clips, audio sources and a software mixer."""

from __future__ import annotations

import io
import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Protocol

CHANNELS = 2
SAMPLE_RATE = 48000


class AudioState(Enum):
    """The playback state of an audio source."""

    PLAY = "play"
    PAUSE = "pause"
    STOP = "stop"


class _Decoder(Protocol):
    def read(self, frame_count: int, loop: bool) -> Sequence[float]: ...

    def seek(self, frame: int) -> None: ...

    def close(self) -> None: ...


DecoderFactory = Callable[[BinaryIO], _Decoder]


class AudioClip(ABC):
    """An audio file that can be opened for decoding."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    @abstractmethod
    def open(self) -> BinaryIO:
        """Return a new binary stream over the encoded audio."""


class CachedAudioClip(AudioClip):
    """A clip read into memory once; suited to short sounds."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(path)
        with open(self.path, "rb") as stream:
            self.data = stream.read()

    def open(self) -> BinaryIO:
        return io.BytesIO(self.data)


class StreamAudioClip(AudioClip):
    """A clip read straight from disk; suited to long tracks."""

    def open(self) -> BinaryIO:
        return open(self.path, "rb")


@dataclass(eq=False)
class AudioSource:
    """What to play and how: the clip, state, volume, panning and looping.

    Volume runs from 0 (silent) to 1 (full); pan from -1 (left) to 1 (right).
    """

    clip: AudioClip
    state: AudioState = AudioState.STOP
    volume: float = 1.0
    pan: float = 0.0
    loop: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def _set_state(self, state: AudioState) -> None:
        with self._lock:
            self.state = state

    def play(self) -> None:
        """Start or resume playback."""
        self._set_state(AudioState.PLAY)

    def pause(self) -> None:
        """Pause playback, keeping the position."""
        self._set_state(AudioState.PAUSE)

    def stop(self) -> None:
        """Stop playback; the source restarts from the beginning."""
        self._set_state(AudioState.STOP)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def mix_frames(
    output: Sequence[float], samples: Sequence[float], volume: float, pan: float
) -> list[float]:
    """Return the interleaved stereo output with the samples mixed in.

    Missing samples count as silence; extra samples are ignored.
    """
    left = 1 - _clamp(pan, 0.0, 1.0)
    right = 1 - abs(_clamp(pan, -1.0, 0.0))
    count = len(output)
    padded = list(samples[:count]) + [0.0] * (count - len(samples))
    gains = (volume * left, volume * right)
    return [
        out + gains[position % CHANNELS] * sample
        for position, (out, sample) in enumerate(zip(output, padded))
    ]


class AudioDevice:
    """Mixes every playing source into stereo frames.

    The decoder factory turns an opened clip stream into a decoder with
    ``read(frame_count, loop)`` returning interleaved stereo samples at
    SAMPLE_RATE (empty at the end), ``seek(frame)`` and ``close()``.
    """

    def __init__(self, decoder_factory: DecoderFactory) -> None:
        self._decoder_factory = decoder_factory
        self._sources: dict[AudioSource, tuple[_Decoder, BinaryIO]] = {}
        self._lock = threading.Lock()

    def __enter__(self) -> AudioDevice:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    def __contains__(self, source: object) -> bool:
        return source in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def add(self, source: AudioSource) -> None:
        """Start mixing a source; adding it again does nothing."""
        with self._lock:
            if source in self._sources:
                return
            stream = source.clip.open()
            try:
                decoder = self._decoder_factory(stream)
            except Exception:
                stream.close()
                raise
            self._sources[source] = (decoder, stream)

    def remove(self, source: AudioSource) -> None:
        """Stop mixing a source and release its decoder."""
        with self._lock:
            entry = self._sources.pop(source, None)
        if entry is not None:
            _release(entry)

    def clear(self) -> None:
        """Remove every source."""
        with self._lock:
            entries = list(self._sources.values())
            self._sources.clear()
        for entry in entries:
            _release(entry)

    def render(self, frame_count: int) -> list[float]:
        """Mix the next frames of every playing source.

        A source whose decoder has no more data is stopped, and stopped
        sources are rewound to the start.
        """
        if frame_count < 0:
            raise ValueError("the frame count must not be negative")
        output = [0.0] * (frame_count * CHANNELS)
        with self._lock:
            for source, (decoder, _) in self._sources.items():
                if source.state is AudioState.PLAY:
                    samples = decoder.read(frame_count, source.loop)
                    if samples:
                        output = mix_frames(output, samples, source.volume, source.pan)
                    else:
                        source.stop()
                if source.state is AudioState.STOP:
                    decoder.seek(0)
        return output


def _release(entry: tuple[_Decoder, BinaryIO]) -> None:
    decoder, stream = entry
    decoder.close()
    stream.close()