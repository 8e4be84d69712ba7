"""
Facade pattern: one call to start video playback over four subsystems.
"""

# pylint: disable=too-few-public-methods

from typing import Any

from catalog.effects import EffectLog
from catalog.patterns.base import PatternDemo


class StreamClient:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def open(self, video_id: str) -> str:
        self._effects.emit(f"network: open stream {video_id}")
        return f"stream://{video_id}"


class Decoder:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def configure(self, codec: str) -> None:
        self._effects.emit(f"decoder: configure {codec}")


class Buffer:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def prefill(self, url: str, seconds: int) -> None:
        self._effects.emit(f"buffer: prefill {seconds}s from {url}")


class Renderer:
    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects

    def attach(self, surface: str) -> None:
        self._effects.emit(f"renderer: attach {surface}")

    def start(self) -> None:
        self._effects.emit("renderer: start")


class MediaPlaybackFacade:
    """Single entry point for the player screen.

    Subsystems are always driven in the same order: network, decoder,
    buffer, renderer.
    """

    def __init__(self, effects: EffectLog, codec: str = "h264", prefill_seconds: int = 5) -> None:
        self._stream = StreamClient(effects)
        self._decoder = Decoder(effects)
        self._buffer = Buffer(effects)
        self._renderer = Renderer(effects)
        self._codec = codec
        self._prefill_seconds = prefill_seconds

    def play(self, video_id: str, surface: str = "main-surface") -> None:
        url = self._stream.open(video_id)
        self._decoder.configure(self._codec)
        self._buffer.prefill(url, self._prefill_seconds)
        self._renderer.attach(surface)
        self._renderer.start()


class FacadeDemo(PatternDemo):
    name = "facade"
    summary = "A playback facade hides the network, decoder, buffer and renderer"
    default_inputs = {"video_id": "intro-42", "codec": "h264"}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        MediaPlaybackFacade(effects, codec=str(inputs["codec"])).play(str(inputs["video_id"]))
