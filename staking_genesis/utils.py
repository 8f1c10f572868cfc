import re

from Crypto.Hash import keccak
from eth_utils import decode_hex, encode_hex, remove_0x_prefix
from rlp.sedes import big_endian_int, Binary

from staking_genesis.exceptions import InvalidAddress


def sha3_256(x): return keccak.new(digest_bits=256, data=x).digest()


def big_endian_to_int(x): return big_endian_int.deserialize(
    to_string(x).lstrip(b'\x00'))


def int_to_big_endian(x): return big_endian_int.serialize(x)


TT256 = 2 ** 256
TT256M1 = 2 ** 256 - 1
TT64 = 2 ** 64


def is_numeric(x): return isinstance(x, int) and not isinstance(x, bool)


def is_string(x): return isinstance(x, bytes)


def to_string(value):
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return bytes(value, 'utf-8')
    if isinstance(value, int):
        return bytes(str(value), 'utf-8')
    raise TypeError("Cannot convert %r to bytes" % (value,))


def encode_int32(v):
    if not is_numeric(v) or v < 0 or v >= TT256:
        raise ValueError("Integer invalid or out of range: %r" % (v,))
    return v.to_bytes(32, byteorder='big')


def sha3(seed):
    return sha3_256(to_string(seed))


assert encode_hex(sha3(b'')) == \
    '0xc5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'


def zpad(x, l):
    """ Left zero pad value `x` at least to length `l`.

    >>> zpad(b'', 1)
    b'\\x00'
    >>> zpad(b'\\xca\\xfe', 4)
    b'\\x00\\x00\\xca\\xfe'
    >>> zpad(b'\\xca\\xfe', 2)
    b'\\xca\\xfe'
    """
    return b'\x00' * max(0, l - len(x)) + x


def rzpad(value, total_length):
    """ Right zero pad value `x` at least to length `l`.

    >>> rzpad(b'\\xca\\xfe', 4)
    b'\\xca\\xfe\\x00\\x00'
    """
    return value + b'\x00' * max(0, total_length - len(value))


def bytes_to_hash(x):
    """Turn `x` into a 32 byte storage word.

    Shorter values are left padded with zeros, longer values keep their
    low-order 32 bytes.
    """
    return zpad(to_string(x), 32)[-32:]


def normalize_address(x):
    if isinstance(x, str):
        x = remove_0x_prefix(x)
        if len(x) != 40:
            raise InvalidAddress("Invalid address format: %r" % x)
        try:
            x = decode_hex(x)
        except ValueError:
            raise InvalidAddress("Invalid address format: %r" % x)
    elif isinstance(x, (bytearray, memoryview)):
        x = bytes(x)
    if not is_string(x) or len(x) != 20:
        raise InvalidAddress("Invalid address format: %r" % (x,))
    return x


UINT_RE = re.compile(r'0[xX][0-9a-fA-F]+|[0-9]+')


def parse_uint256_or_hex(s):
    """Parse a decimal or `0x` prefixed hex string into an unsigned int.

    Integers are passed through after a range check. Signs, whitespace and
    digit separators are rejected. Raises `ValueError` for anything that is
    not a valid unsigned 256 bit number.
    """
    if is_numeric(s):
        v = s
    elif isinstance(s, (str, bytes)):
        s = s.decode('ascii') if isinstance(s, bytes) else s
        if not UINT_RE.fullmatch(s):
            raise ValueError("Not an unsigned decimal or hex number: %r" % s)
        v = int(s[2:], 16) if s[:2] in ('0x', '0X') else int(s, 10)
    else:
        raise ValueError("Cannot parse %r as an unsigned integer" % (s,))
    if v < 0 or v >= TT256:
        raise ValueError("Integer out of uint256 range: %r" % (s,))
    return v


def int_to_hex(x):
    return '0x%x' % x


address = Binary.fixed_length(20)
hash32 = Binary.fixed_length(32)
