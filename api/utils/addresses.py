"""
Address Utilities

Wallet addresses reach the collection as bech32 strings. They are parsed
with PyCardano so that two spellings of one address never become two
ledger keys.
"""

import pycardano as pc
from fastapi import HTTPException

from api.config import settings
from api.enums import NetworkType


class InvalidAddressError(ValueError):
    """Address is malformed or belongs to another network"""

    pass


def cardano_network(network: NetworkType | str) -> pc.Network:
    return pc.Network.MAINNET if NetworkType(network) == NetworkType.MAINNET else pc.Network.TESTNET


def normalize_address(address: str, network: NetworkType | str = NetworkType.TESTNET) -> str:
    """
    Parse and re-encode a bech32 address.

    Args:
        address: Bech32 address (addr_test1... / addr1...)
        network: Network the address must belong to

    Returns:
        str: Canonical bech32 encoding

    Raises:
        InvalidAddressError: If the address cannot be parsed or is on the wrong network
    """
    try:
        parsed = pc.Address.from_primitive(address.strip())
    except Exception as e:
        raise InvalidAddressError(f"Invalid Cardano address '{address}': {str(e)}")

    expected = cardano_network(network)
    if parsed.network != expected:
        raise InvalidAddressError(f"Address {address} is not a {NetworkType(network).value} address")

    return str(parsed)


def parse_request_address(address: str) -> str:
    """Normalize an address taken from a request, rejecting it with 422 when invalid"""
    try:
        return normalize_address(address, settings.network)
    except InvalidAddressError as e:
        raise HTTPException(status_code=422, detail=str(e))
