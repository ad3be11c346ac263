"""Read-only multi-valued string mappings for request metadata.

Header names and query keys can both repeat. Both are stored as an
ordered tuple of decoded ``(key, value)`` pairs and looked up by a
normalized key: ``self[key]`` is the first value, ``get_list(key)`` all
of them.
"""

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qsl


class MultiDict(Mapping[str, str]):
    """Ordered pairs with first-value lookup. Keys are compared as given."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._pairs: tuple[tuple[str, str], ...] = tuple(
            (self.normalize(key), value) for key, value in pairs
        )

    @staticmethod
    def normalize(key: str) -> str:
        return key

    def __getitem__(self, key: str) -> str:
        wanted = self.normalize(key)
        for name, value in self._pairs:
            if name == wanted:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        wanted = self.normalize(key)
        return any(name == wanted for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._pairs))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._pairs))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._pairs)!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value for *key*, in arrival order."""
        wanted = self.normalize(key)
        return [value for name, value in self._pairs if name == wanted]


class Headers(MultiDict):
    """Request headers. Names are case-insensitive and iterate lower-cased."""

    __slots__ = ()

    @staticmethod
    def normalize(key: str) -> str:
        return key.lower()

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> Headers:
        """Decode the ASGI ``headers`` list (latin-1 byte pairs)."""
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)


class QueryParams(MultiDict):
    """Query string parameters. Blank values are kept as ``""``."""

    __slots__ = ("raw",)

    def __init__(self, query_string: bytes = b"") -> None:
        super().__init__(parse_qsl(query_string.decode("latin-1"), keep_blank_values=True))
        self.raw = query_string
