from typing import List

from pydantic import BaseModel, ConfigDict, field_serializer

from constants.event_signature import BATCH_ISSUED_EVENT_TOPIC, ISSUED_EVENT_TOPIC, OVERRIDE_SET_EVENT_TOPIC
from minting.enums.event_type import EventType


class OverrideSetEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = EventType.OVERRIDE_SET.value
    topic: str = OVERRIDE_SET_EVENT_TOPIC
    token_id: int
    uri: str

    # uint256 does not survive JSON/Avro number types, ids travel as decimal strings
    @field_serializer("token_id")
    def _serialize_token_id(self, token_id: int) -> str:
        return str(token_id)


class IssuedEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = EventType.ISSUED.value
    topic: str = ISSUED_EVENT_TOPIC
    recipient: str
    edition: int
    item: int

    @field_serializer("edition")
    def _serialize_edition(self, edition: int) -> str:
        return str(edition)


class BatchIssuedEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = EventType.BATCH_ISSUED.value
    topic: str = BATCH_ISSUED_EVENT_TOPIC
    recipient: str
    editions: List[int]
    items: List[int]

    @field_serializer("editions")
    def _serialize_editions(self, editions: List[int]) -> List[str]:
        return [str(edition) for edition in editions]
