from typing import Iterator, Mapping, Optional

from .errors import ArgumentError


class RequestHeaders:
    """Case-insensitive store of request headers.

    Keys are normalized to lowercase and the last value written for a key wins.
    """

    def __init__(self) -> None:
        self._headers: dict[str, str] = {}

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower()

    def add(self, key: str, value: str) -> None:
        if not key:
            raise ArgumentError.missing("key")
        if value is None:
            raise ArgumentError.missing("value")
        self._headers[self._normalize(key)] = value

    def add_all(self, headers: Optional[Mapping[str, str]]) -> None:
        if not headers:
            return
        for key, value in headers.items():
            self.add(key, value)

    def remove(self, key: str) -> None:
        if not key:
            raise ArgumentError.missing("key")
        self._headers.pop(self._normalize(key), None)

    def get(self, key: str) -> Optional[str]:
        return self._headers.get(self._normalize(key))

    def to_dict(self) -> dict[str, str]:
        return dict(self._headers)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._normalize(key) in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._headers))

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"RequestHeaders({self._headers!r})"
