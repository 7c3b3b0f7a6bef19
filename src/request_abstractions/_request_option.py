from typing import Iterable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound="RequestOption")


class RequestOption(BaseModel):
    """Per-call configuration read by the transport layer.

    Options are unique by kind: a request holds at most one option per
    ``option_key()``.
    """

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def option_key(cls) -> str:
        """Gets the key identifying the kind of this option."""
        return f"{cls.__module__}.{cls.__qualname__}"


class RetryOption(RequestOption):
    """Retry policy for transient failures."""

    max_retries: int = Field(default=3, ge=0)
    retry_on_status: list[int] = Field(
        default_factory=lambda: [429, 500, 502, 503, 504]
    )


class TimeoutOption(RequestOption):
    timeout: Optional[float] = Field(default=None, gt=0)


class RequestOptions:
    """Store of request options keyed by option kind; the last added wins."""

    def __init__(self) -> None:
        self._options: dict[str, RequestOption] = {}

    def add(self, options: Optional[Iterable[RequestOption]]) -> None:
        if not options:
            return
        for option in options:
            self._options[option.option_key()] = option

    def remove(self, *options: RequestOption) -> None:
        for option in options:
            self._options.pop(option.option_key(), None)

    def get(self, kind: type[T]) -> Optional[T]:
        option = self._options.get(kind.option_key())
        return option if isinstance(option, kind) else None

    def values(self) -> list[RequestOption]:
        return list(self._options.values())

    def __len__(self) -> int:
        return len(self._options)
