"""
Strategy pattern: interchangeable feed sorting.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

from catalog.effects import EffectLog
from catalog.errors import NotFound
from catalog.patterns.base import PatternDemo


@dataclass(frozen=True)
class Post:
    title: str
    posted_at: int
    likes: int


SortStrategy = Callable[[Sequence[Post]], List[Post]]


def by_recent(posts: Sequence[Post]) -> List[Post]:
    return sorted(posts, key=lambda p: p.posted_at, reverse=True)


def by_popular(posts: Sequence[Post]) -> List[Post]:
    # Ties keep the more recent post first
    return sorted(posts, key=lambda p: (p.likes, p.posted_at), reverse=True)


def by_title(posts: Sequence[Post]) -> List[Post]:
    return sorted(posts, key=lambda p: p.title.lower())


STRATEGIES: Dict[str, SortStrategy] = {
    "recent": by_recent,
    "popular": by_popular,
    "alphabetical": by_title,
}


class Feed:
    """Context object; the sort strategy can be swapped at runtime."""

    def __init__(self, posts: Sequence[Post], strategy: SortStrategy = by_recent) -> None:
        self._posts = list(posts)
        self.strategy = strategy

    def items(self) -> List[Post]:
        return self.strategy(self._posts)


def get_strategy(name: str) -> SortStrategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise NotFound(f"unknown sort strategy {name!r}") from None


SAMPLE_POSTS = (
    Post("Sunset", posted_at=3, likes=12),
    Post("breakfast", posted_at=1, likes=40),
    Post("Commute", posted_at=2, likes=12),
)


class StrategyDemo(PatternDemo):
    name = "strategy"
    summary = "A feed swaps between recent, popular and alphabetical sorting"
    default_inputs = {"strategies": ["recent", "popular", "alphabetical"]}

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        feed = Feed(SAMPLE_POSTS)
        for name in inputs["strategies"]:
            feed.strategy = get_strategy(str(name))
            effects.emit(f"{name}: {', '.join(post.title for post in feed.items())}")
