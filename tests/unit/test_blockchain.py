"""Tests for the static blockchain configuration lookup."""
import pytest
from pydantic import ValidationError

from agentforge.config import Settings
from agentforge.core.generation.blockchain import build_blockchain_config, wants_blockchain_config
from agentforge.core.generation.models import BlockchainNetwork, GenerationRequest


def _request(integrations):
    return GenerationRequest(description="token swap", integrations=integrations)


@pytest.mark.parametrize(
    "integrations, expected",
    [
        (None, False),
        ([], False),
        (["twitter"], False),
        (["solana"], False),
        (["metaplex"], True),
        (["pyth"], True),
        (["Jupiter"], True),
        (["PYTH", "twitter"], True),
    ],
)
def test_wants_blockchain_config(integrations, expected):
    assert wants_blockchain_config(_request(integrations)) is expected


def test_jupiter_and_pyth_programs():
    config = build_blockchain_config(_request(["pyth", "jupiter"]))
    assert config.network is BlockchainNetwork.DEVNET
    assert [p.name for p in config.programs] == ["Jupiter V6", "Pyth Oracle"]
    assert config.programs[0].address == "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
    assert config.programs[1].address == "FsJ3A3u2vn5cTVofAjvy6y5kwABJAqYWpe4975bi2epH"
    assert config.tokens == []


def test_metaplex_has_no_known_program():
    config = build_blockchain_config(_request(["metaplex"]))
    assert config.programs == []


def test_network_override():
    config = build_blockchain_config(_request(["jupiter"]), "mainnet-beta")
    assert config.network is BlockchainNetwork.MAINNET_BETA


def test_tags_match_case_insensitively():
    config = build_blockchain_config(_request(["Jupiter", "PYTH"]))
    assert [p.name for p in config.programs] == ["Jupiter V6", "Pyth Oracle"]


def test_settings_network_is_validated(monkeypatch):
    monkeypatch.setenv("BLOCKCHAIN_NETWORK", "mainnet")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_network_parsed(monkeypatch):
    monkeypatch.setenv("BLOCKCHAIN_NETWORK", "mainnet-beta")
    assert Settings(_env_file=None).blockchain_network is BlockchainNetwork.MAINNET_BETA
