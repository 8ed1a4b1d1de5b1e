import orjson
import pytest

from storage.contract_state_store import ContractState, JsonContractStateStore
from storage.uri_store import InMemoryUriStore

OWNER = "0x1111111111111111111111111111111111111111"


def test_save_and_load(tmp_path):
    store = JsonContractStateStore(str(tmp_path / "nested" / "state.json"))
    state = ContractState(
        default_prefix="https://x/",
        owner=OWNER,
        name="Book Editions",
        symbol="BOOK",
        overrides={"0": "https://x/0.json", str(2**200): "ipfs://big.json"},
        ledger={"balances": {"0": {OWNER: 1}}, "operator_approvals": {}},
    )

    store.save(state)
    loaded = store.load()

    assert loaded == state
    assert loaded.override_table() == {0: "https://x/0.json", 2**200: "ipfs://big.json"}


def test_save_leaves_no_temp_file(tmp_path):
    store = JsonContractStateStore(str(tmp_path / "state.json"))

    store.save(ContractState(default_prefix="https://x/"))

    assert [p.name for p in tmp_path.iterdir()] == ["state.json"]
    assert orjson.loads((tmp_path / "state.json").read_bytes())["default_prefix"] == "https://x/"


def test_load_missing_file(tmp_path):
    store = JsonContractStateStore(str(tmp_path / "missing.json"))

    assert not store.exists()
    with pytest.raises(FileNotFoundError):
        store.load()


def test_in_memory_uri_store():
    uri_store = InMemoryUriStore("https://x/", {1: "ipfs://one.json"})

    uri_store.put_overrides({2: "ipfs://two.json", 1: "ipfs://uno.json"})
    uri_store.set_default_prefix("https://y/")

    assert uri_store.get_default_prefix() == "https://y/"
    assert uri_store.get_override(1) == "ipfs://uno.json"
    assert uri_store.get_override(3) is None
    snapshot = uri_store.overrides()
    snapshot[4] = "mutated"
    assert uri_store.get_override(4) is None


def test_in_memory_uri_store_remove_overrides():
    uri_store = InMemoryUriStore("https://x/", {1: "ipfs://one.json", 2: "ipfs://two.json"})

    uri_store.remove_overrides([1, 3])

    assert uri_store.overrides() == {2: "ipfs://two.json"}
