"""Small helpers for decoding chain storage data."""

from __future__ import annotations


def _trailing_u32(key: bytes) -> int:
    if len(key) < 4:
        raise ValueError("slice with incorrect length")
    return int.from_bytes(key[-4:], "little")


def para_id_from_storage_key(key: bytes) -> int:
    """Para id stored little-endian in the last four bytes of a storage key."""
    return _trailing_u32(key)


def nft_id_from_storage_key(key: bytes) -> int:
    """NFT item id stored little-endian in the last four bytes of a storage key."""
    return _trailing_u32(key)


def utf8_str(data: bytes) -> str:
    """Decode UTF-8 bytes; raises UnicodeDecodeError if they are not."""
    return bytes(data).decode("utf-8")


def compact(account: object) -> str:
    """Shorten an address to its first and last four characters."""
    text = str(account)
    if len(text) < 4:
        raise ValueError("account address too short to compact")
    return f"{text[:4]}...{text[-4:]}"