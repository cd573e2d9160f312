from chains.dto import ChainConfig
from config import settings


ethereum = ChainConfig(
    chain_id=1,
    name="ethereum",
    display_name="Ethereum",
    symbol="ETH",
    explorer=settings.EXPLORER_URL,
    rpc_url=settings.RPC_URL,
    multicall_address=settings.MULTICALL_ADDRESS,
)
