from pydantic import BaseModel, ConfigDict, computed_field

from constants.token_id import EDITION_MULTIPLIER


class BookToken(BaseModel):
    """A single copy (item) of a printed edition, as carried by one ERC-1155 token id."""

    model_config = ConfigDict(frozen=True)

    edition: int
    item: int

    @computed_field
    @property
    def token_id(self) -> int:
        return self.edition * EDITION_MULTIPLIER + self.item
