"""
Storage index derivation for compiled contract state.

Follows the compiler's storage layout rules:

* a value type declared at slot ``p`` lives at key ``p``
* ``mapping(address => T)`` at slot ``p`` stores the value for ``k`` at
  ``keccak(pad32(k) . pad32(p))``
* a dynamic array at slot ``p`` stores its length at ``p`` and element ``i``
  at ``keccak(pad32(p)) + i``
* ``bytes`` shorter than 32 bytes are stored inline with ``2 * len`` in the
  lowest-order byte; longer values store ``2 * len + 1`` at the base key and
  the data in consecutive slots starting at ``keccak(base key)``

https://docs.soliditylang.org/en/latest/internals/layout_in_storage.html
"""
from staking_genesis.utils import (
    sha3,
    zpad,
    rzpad,
    big_endian_to_int,
    int_to_big_endian,
    bytes_to_hash,
    encode_int32,
)

SLOT_SIZE = 32
MAX_SHORT_BYTES_LENGTH = SLOT_SIZE - 1


def get_address_mapping(address, slot):
    """Key of ``address`` in the mapping declared at `slot`."""
    return sha3(zpad(address, 32)[-32:] + zpad(int_to_big_endian(slot), 32))


def get_array_base(slot):
    """Key of the first element of the dynamic array declared at `slot`."""
    return sha3(zpad(int_to_big_endian(slot), 32))


def get_index_with_offset(key, offset):
    """Add `offset` to the hash derived `key`.

    The sum is not reduced modulo 2**256. The result is the minimal big
    endian encoding, so it may be shorter than 32 bytes; use
    `bytes_to_hash` to get a storage word.
    """
    return int_to_big_endian(big_endian_to_int(key) + offset)


def set_bytes_to_storage(storage, base_index, data):
    """Write `data` as a ``bytes`` value whose base key is `base_index`.

    `base_index` is the not yet hashed key (e.g. a mapping key); the
    continuation slots of long values hang off ``keccak(base_index)``.
    `storage` is updated in place and also returned.
    """
    data_len = len(data)
    base_key = bytes_to_hash(base_index)

    if data_len <= MAX_SHORT_BYTES_LENGTH:
        storage[base_key] = rzpad(data, SLOT_SIZE - 1) + bytes([data_len * 2])
        return storage

    storage[base_key] = encode_int32(data_len * 2 + 1)

    zero_index = sha3(base_index)
    for offset in range(0, data_len, SLOT_SIZE):
        slot_key = bytes_to_hash(get_index_with_offset(zero_index, offset // SLOT_SIZE))
        storage[slot_key] = rzpad(data[offset:offset + SLOT_SIZE], SLOT_SIZE)
    return storage


def storage_to_dict(storage):
    """Render a storage map with ``0x`` hex keys and values, sorted by key."""
    return dict(
        ('0x' + k.hex(), '0x' + v.hex()) for k, v in sorted(storage.items())
    )
