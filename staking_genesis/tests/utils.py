"""Utilities used by more than one test."""

from staking_genesis.storage import SLOT_SIZE, get_index_with_offset
from staking_genesis.utils import big_endian_to_int, bytes_to_hash, sha3

ZERO_WORD = b'\x00' * 32


def decode_bytes_from_storage(storage, base_index):
    """Read back a ``bytes`` value written by `set_bytes_to_storage`."""
    word = storage.get(bytes_to_hash(base_index), ZERO_WORD)
    if word[-1] % 2 == 0:
        length = word[-1] // 2
        return word[:length]
    length = (big_endian_to_int(word) - 1) // 2
    zero_index = sha3(base_index)
    data = b''
    for i in range((length + SLOT_SIZE - 1) // SLOT_SIZE):
        data += storage.get(bytes_to_hash(get_index_with_offset(zero_index, i)), ZERO_WORD)
    return data[:length]


def decode_uint(storage, key):
    return big_endian_to_int(storage.get(bytes_to_hash(key), ZERO_WORD))
