from abc import ABC, abstractmethod
from typing import Dict, Iterable, Mapping, Optional


class UriStore(ABC):
    """Persisted metadata state: the default URI prefix and the per-token override table."""

    @abstractmethod
    def get_default_prefix(self) -> str:
        ...

    @abstractmethod
    def set_default_prefix(self, prefix: str) -> None:
        ...

    @abstractmethod
    def get_override(self, token_id: int) -> Optional[str]:
        ...

    @abstractmethod
    def put_overrides(self, overrides: Mapping[int, str]) -> None:
        """Writes all given entries, in iteration order."""

    @abstractmethod
    def remove_overrides(self, token_ids: Iterable[int]) -> None:
        """Drops the entries of the given ids, missing ids are ignored."""

    @abstractmethod
    def overrides(self) -> Dict[int, str]:
        """Returns a copy of the whole override table."""


class InMemoryUriStore(UriStore):
    def __init__(self, default_prefix: str, overrides: Optional[Mapping[int, str]] = None):
        self._default_prefix: str = default_prefix
        self._overrides: Dict[int, str] = dict(overrides or {})

    def get_default_prefix(self) -> str:
        return self._default_prefix

    def set_default_prefix(self, prefix: str) -> None:
        self._default_prefix = prefix

    def get_override(self, token_id: int) -> Optional[str]:
        return self._overrides.get(token_id)

    def put_overrides(self, overrides: Mapping[int, str]) -> None:
        for token_id, uri in overrides.items():
            self._overrides[token_id] = uri

    def remove_overrides(self, token_ids: Iterable[int]) -> None:
        for token_id in token_ids:
            self._overrides.pop(token_id, None)

    def overrides(self) -> Dict[int, str]:
        return dict(self._overrides)
