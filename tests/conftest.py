from __future__ import annotations

import pytest

from chains.dto import ChainConfig
from fakes import MULTICALL, FakeWeb3


@pytest.fixture
def chain_config() -> ChainConfig:
    return ChainConfig(
        chain_id=1,
        name="ethereum",
        display_name="Ethereum",
        symbol="ETH",
        explorer="https://etherscan.io/",
        rpc_url="http://localhost:8545",
        multicall_address=MULTICALL,
    )


@pytest.fixture
def fake_w3() -> FakeWeb3:
    return FakeWeb3(MULTICALL)
