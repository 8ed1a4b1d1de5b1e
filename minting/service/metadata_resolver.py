from typing import Dict, Mapping, Optional

from constants.token_id import TOKEN_URI_SUFFIX
from minting.service.identifier_codec import IdentifierCodec
from storage.uri_store import UriStore
from utils.logger_utils import get_logger

logger = get_logger("Metadata Resolver")


class MetadataResolver(object):
    """
    Resolves token ids to metadata URIs.

    A non-empty entry in the override table wins; otherwise the URI is
    ``<default prefix><decimal token id>.json``. An empty override is
    stored as given but resolves like a missing one.
    """

    def __init__(self, uri_store: UriStore):
        self._uri_store = uri_store

    def resolve(self, token_id: int) -> str:
        override = self._uri_store.get_override(token_id)
        if override:
            return override
        return self.default_uri(token_id)

    def resolve_by_parts(self, edition: int, item: int) -> str:
        return self.resolve(IdentifierCodec.encode(edition, item))

    def default_uri(self, token_id: int) -> str:
        return f"{self._uri_store.get_default_prefix()}{token_id}{TOKEN_URI_SUFFIX}"

    def current_default_prefix(self) -> str:
        return self._uri_store.get_default_prefix()

    def replace_default_prefix(self, prefix: str) -> None:
        previous = self._uri_store.get_default_prefix()
        self._uri_store.set_default_prefix(prefix)
        logger.info(f"Default URI prefix changed from '{previous}' to '{prefix}'")

    def write_overrides(self, overrides: Mapping[int, str]) -> Dict[int, Optional[str]]:
        """Writes the entries and returns what they replaced, None where there was no entry."""
        previous = {token_id: self._uri_store.get_override(token_id) for token_id in overrides}
        self._uri_store.put_overrides(overrides)
        logger.debug(f"Wrote {len(overrides)} token URI entries")
        return previous

    def restore_overrides(self, previous: Mapping[int, Optional[str]]) -> None:
        self._uri_store.put_overrides({token_id: uri for token_id, uri in previous.items() if uri is not None})
        self._uri_store.remove_overrides([token_id for token_id, uri in previous.items() if uri is None])
        logger.debug(f"Restored {len(previous)} token URI entries")
