"""Static Solana program lookup for blockchain integrations.

No RPC calls are made; the configuration is built from a fixed table keyed
by integration tag.
"""

from __future__ import annotations

from agentforge.core.generation.models import (
    BlockchainConfig,
    BlockchainNetwork,
    GenerationRequest,
    ProgramReference,
)

# Tags that make the generator build a blockchain configuration; matched
# case-insensitively, like the prompt tags in the composer.
BLOCKCHAIN_CONFIG_TAGS: frozenset[str] = frozenset({"jupiter", "pyth", "metaplex"})

# Ordered: programs appear in the config in this order.
KNOWN_PROGRAMS: tuple[tuple[str, ProgramReference], ...] = (
    ("jupiter", ProgramReference(name="Jupiter V6", address="JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4")),
    ("pyth", ProgramReference(name="Pyth Oracle", address="FsJ3A3u2vn5cTVofAjvy6y5kwABJAqYWpe4975bi2epH")),
)


def wants_blockchain_config(request: GenerationRequest) -> bool:
    return any(tag.lower() in BLOCKCHAIN_CONFIG_TAGS for tag in request.integration_tags)


def build_blockchain_config(
    request: GenerationRequest,
    network: BlockchainNetwork | str = BlockchainNetwork.DEVNET,
) -> BlockchainConfig:
    """Return the program references matching the request's integrations."""
    tags = {tag.lower() for tag in request.integration_tags}
    programs = [program for tag, program in KNOWN_PROGRAMS if tag in tags]
    return BlockchainConfig(
        network=BlockchainNetwork(network),
        programs=programs,
        tokens=[],
    )
