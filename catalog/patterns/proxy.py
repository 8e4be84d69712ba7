"""
Proxy pattern: caching, access control and lazy loading in front of an image source.

The remote source is an in-memory stand-in; no real network I/O happens.
"""

# pylint: disable=too-few-public-methods

import concurrent.futures
import threading
from typing import Any, Collection, Dict, Optional, Protocol

from catalog.effects import EffectLog
from catalog.errors import Unauthorized
from catalog.patterns.base import PatternDemo
from catalog.tasks import CancellationToken, Task, TaskOutcome


class ImageSource(Protocol):
    """Capability shared by the real source and all of its proxies."""

    def fetch(self, key: str) -> str: ...


class RemoteImageSource:
    """Test double for a CDN; records every load."""

    def __init__(self, effects: EffectLog) -> None:
        self._effects = effects
        self.loads = 0

    def fetch(self, key: str) -> str:
        self.loads += 1
        self._effects.emit("loaded-from-source")
        return f"<image {key}>"


class CachingImageProxy:
    """Serves repeated keys from an in-memory cache.

    The cache belongs to this proxy instance. Lookups and inserts happen under
    one lock so concurrent callers never load the same key twice.
    """

    def __init__(self, source: ImageSource, effects: EffectLog) -> None:
        self._source = source
        self._effects = effects
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def fetch(self, key: str) -> str:
        with self._lock:
            if key in self._cache:
                self._effects.emit("loaded-from-cache")
                return self._cache[key]
            image = self._source.fetch(key)
            self._cache[key] = image
            return image

    def invalidate(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._cache.clear()
            else:
                self._cache.pop(key, None)

    def __len__(self) -> int:
        return len(self._cache)


class AuthorizingImageProxy:
    """Rejects fetches made without a recognised session token."""

    def __init__(
        self, inner: ImageSource, token: Optional[str], valid_tokens: Collection[str]
    ) -> None:
        self._inner = inner
        self._token = token
        self._valid_tokens = valid_tokens

    def fetch(self, key: str) -> str:
        if not self._token or self._token not in self._valid_tokens:
            raise Unauthorized(f"token required to fetch {key!r}")
        return self._inner.fetch(key)


class LazyImageProxy:
    """Placeholder that loads the real image on first request.

    Loading runs as a one-shot Task; its completion callback fires exactly
    once, with either the image or a cancellation.
    """

    def __init__(self, key: str, source: ImageSource, effects: EffectLog) -> None:
        self.key = key
        self._source = source
        self._effects = effects
        self._task: Optional[Task[str]] = None
        self.image: Optional[str] = None

    def load(self) -> Task[str]:
        """Return the loading task, creating it on first use (not started)."""
        if self._task is None:
            self._task = Task(self._fetch, name=f"load:{self.key}")
            self._task.add_done_callback(self._on_done)
        return self._task

    def display(
        self, executor: Optional[concurrent.futures.Executor] = None
    ) -> TaskOutcome[str]:
        task = self.load()
        task.start(executor)
        return task.result()

    def _fetch(self, token: CancellationToken) -> str:
        token.raise_if_cancelled()
        return self._source.fetch(self.key)

    def _on_done(self, outcome: TaskOutcome[str]) -> None:
        if outcome.succeeded:
            self.image = outcome.value
            self._effects.emit(f"lazy image ready: {self.key}")
        elif outcome.cancelled:
            self._effects.emit("cancelled")
        else:
            self._effects.emit(f"lazy image failed: {outcome.error}")


VALID_TOKENS = frozenset({"valid-token"})


class ProxyDemo(PatternDemo):
    name = "proxy"
    summary = "Caching, protection and lazy-loading proxies for an image source"
    default_inputs = {
        "keys": ["avatar.png", "avatar.png", "banner.png"],
        "token": "valid-token",
        "cancel_lazy": False,
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        source = RemoteImageSource(effects)
        gallery = AuthorizingImageProxy(
            CachingImageProxy(source, effects), inputs["token"], VALID_TOKENS
        )
        for key in inputs["keys"]:
            gallery.fetch(str(key))

        lazy = LazyImageProxy("hero.png", source, effects)
        if inputs["cancel_lazy"]:
            lazy.load().cancel()
        lazy.display()
