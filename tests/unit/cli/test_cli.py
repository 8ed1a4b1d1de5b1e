import orjson
import pytest
from click.testing import CliRunner

from cli import cli

OWNER = "0x1111111111111111111111111111111111111111"
ALICE = "0x2222222222222222222222222222222222222222"
MALLORY = "0x3333333333333333333333333333333333333333"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def state_file(runner, tmp_path):
    path = str(tmp_path / "state.json")
    result = runner.invoke(
        cli,
        ["init_contract", "-f", path, "--owner", OWNER, "--default-prefix", "https://books.test/", "--name", "Books", "--symbol", "BK"],
    )
    assert result.exit_code == 0, result.output
    return path


def _state(path):
    with open(path, "rb") as f:
        return orjson.loads(f.read())


def test_encode_and_decode_token_id(runner):
    encoded = runner.invoke(cli, ["encode_token_id", "-e", "12", "-i", "345"])
    decoded = runner.invoke(cli, ["decode_token_id", "-t", "12000345"])

    assert encoded.output.strip() == "12000345"
    assert decoded.output.strip() == "edition=12 item=345"


def test_encode_rejects_item_out_of_range(runner):
    result = runner.invoke(cli, ["encode_token_id", "-e", "1", "-i", "1000000"])

    assert result.exit_code == 1
    assert "OutOfRangeError" in result.output


def test_init_contract_writes_state(state_file):
    state = _state(state_file)

    assert state["owner"] == OWNER
    assert state["default_prefix"] == "https://books.test/"
    assert state["name"] == "Books"
    assert state["overrides"] == {}


def test_init_contract_refuses_to_overwrite(runner, state_file):
    result = runner.invoke(cli, ["init_contract", "-f", state_file, "--owner", OWNER])

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_mint_persists_uri_and_balance(runner, state_file):
    result = runner.invoke(cli, ["mint", "-f", state_file, "-s", OWNER, "-r", ALICE, "-e", "2", "-i", "5"])

    assert result.exit_code == 0, result.output
    assert "Minted token 2000005" in result.output
    assert _state(state_file)["overrides"] == {"2000005": "https://books.test/2000005.json"}

    uri = runner.invoke(cli, ["token_uri", "-f", state_file, "-e", "2", "-i", "5"])
    balance = runner.invoke(cli, ["balance_of", "-f", state_file, "-a", ALICE, "-t", "2000005"])
    assert uri.output.strip() == "https://books.test/2000005.json"
    assert balance.output.strip() == "1"


def test_mint_batch(runner, state_file):
    result = runner.invoke(
        cli, ["mint_batch", "-f", state_file, "-s", OWNER, "-r", ALICE, "-e", "1,1", "-i", "1,2"]
    )

    assert result.exit_code == 0, result.output
    assert "Minted tokens 1000001, 1000002" in result.output
    assert set(_state(state_file)["overrides"]) == {"1000001", "1000002"}


def test_mint_batch_length_mismatch_changes_nothing(runner, state_file):
    result = runner.invoke(
        cli, ["mint_batch", "-f", state_file, "-s", OWNER, "-r", ALICE, "-e", "1,1", "-i", "1"]
    )

    assert result.exit_code == 1
    assert "LengthMismatchError" in result.output
    assert _state(state_file)["overrides"] == {}


def test_unauthorized_mint_leaves_state_untouched(runner, state_file):
    before = _state(state_file)

    result = runner.invoke(cli, ["mint", "-f", state_file, "-s", MALLORY, "-r", ALICE, "-e", "1", "-i", "1"])

    assert result.exit_code == 1
    assert "UnauthorizedError" in result.output
    assert _state(state_file) == before


def test_set_token_uri_and_base_uri(runner, state_file):
    runner.invoke(cli, ["mint", "-f", state_file, "-s", OWNER, "-r", ALICE, "-e", "1", "-i", "1"])

    override = runner.invoke(cli, ["set_token_uri", "-f", state_file, "-s", OWNER, "-t", "1000001", "-u", "ipfs://one.json"])
    prefix = runner.invoke(cli, ["set_base_uri", "-f", state_file, "-s", OWNER, "-p", "ipfs://cid/"])

    assert override.exit_code == 0, override.output
    assert prefix.exit_code == 0, prefix.output
    assert runner.invoke(cli, ["token_uri", "-f", state_file, "-t", "1000001"]).output.strip() == "ipfs://one.json"
    assert runner.invoke(cli, ["token_uri", "-f", state_file, "-t", "7"]).output.strip() == "ipfs://cid/7.json"


def test_transfer_ownership(runner, state_file):
    result = runner.invoke(cli, ["transfer_ownership", "-f", state_file, "-s", OWNER, "-n", ALICE])

    assert result.exit_code == 0, result.output
    assert _state(state_file)["owner"] == ALICE

    rejected = runner.invoke(cli, ["set_base_uri", "-f", state_file, "-s", OWNER, "-p", "ipfs://cid/"])
    assert rejected.exit_code == 1


def test_missing_state_file(runner, tmp_path):
    result = runner.invoke(cli, ["token_uri", "-f", str(tmp_path / "nope.json"), "-t", "1"])

    assert result.exit_code == 1
    assert "init_contract" in result.output
