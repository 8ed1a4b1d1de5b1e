import pathlib
from typing import Any, Dict, Optional

import orjson
from pydantic import BaseModel, Field

from utils.file_utils import atomic_write, smart_open
from utils.logger_utils import get_logger

logger = get_logger("Contract State Store")


class ContractState(BaseModel):
    """Everything needed to rebuild a locally managed contract between process runs."""

    default_prefix: str
    owner: Optional[str] = None
    name: str = ""
    symbol: str = ""
    # Token ids are uint256, kept as decimal string keys
    overrides: Dict[str, str] = Field(default_factory=dict)
    ledger: Dict[str, Any] = Field(default_factory=dict)

    def override_table(self) -> Dict[int, str]:
        return {int(token_id): uri for token_id, uri in self.overrides.items()}


class JsonContractStateStore(object):
    def __init__(self, path: str):
        self.path = pathlib.Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ContractState:
        if not self.exists():
            raise FileNotFoundError(f"Contract state file not found: {self.path}")

        with smart_open(self.path, mode="r", binary=True) as fh:
            data = orjson.loads(fh.read())
        return ContractState.model_validate(data)

    def save(self, state: ContractState) -> None:
        with atomic_write(self.path, binary=True) as fh:
            fh.write(orjson.dumps(state.model_dump(mode="json"), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS))
        logger.debug(f"Saved contract state to {self.path}")
