import rlp
from rlp.sedes import binary

from staking_genesis import utils
from staking_genesis.exceptions import InvalidValidator
from staking_genesis.utils import normalize_address, decode_hex, encode_hex


class ECDSAValidator(object):

    """A validator identified by its address only"""

    def __init__(self, addr):
        self.addr = normalize_address(addr)

    def to_rlp(self):
        return utils.address.serialize(self.addr)

    def __str__(self):
        return encode_hex(self.addr)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        return type(self) is type(other) and self.addr == other.addr

    def __hash__(self):
        return hash((type(self), self.addr))


class BLSValidator(ECDSAValidator):

    """A validator that also carries a BLS public key"""

    def __init__(self, addr, bls_public_key):
        super(BLSValidator, self).__init__(addr)
        if isinstance(bls_public_key, str):
            bls_public_key = decode_hex(bls_public_key)
        self.bls_public_key = utils.to_string(bls_public_key)

    def to_rlp(self):
        return [utils.address.serialize(self.addr), binary.serialize(self.bls_public_key)]

    def __str__(self):
        return '%s:%s' % (encode_hex(self.addr), encode_hex(self.bls_public_key))

    def __eq__(self, other):
        return super(BLSValidator, self).__eq__(other) and \
            self.bls_public_key == other.bls_public_key

    def __hash__(self):
        return hash((type(self), self.addr, self.bls_public_key))


class ValidatorSet(object):

    """
    Ordered, immutable collection of validators.

    The position of a validator in the set is its index in the staking
    contract.
    """

    def __init__(self, validators=()):
        self._validators = tuple(validators)
        for v in self._validators:
            if not hasattr(v, 'addr'):
                raise InvalidValidator('Not a validator: %r' % (v,))

    def __len__(self):
        return len(self._validators)

    def __getitem__(self, index):
        return self._validators[index]

    def __iter__(self):
        return iter(self._validators)

    def __eq__(self, other):
        return isinstance(other, ValidatorSet) and self._validators == other._validators

    def __repr__(self):
        return '<ValidatorSet(%d)>' % len(self)

    def at(self, index):
        return self._validators[index]

    def addresses(self):
        return [v.addr for v in self._validators]

    def rlp_encode(self):
        return rlp.encode([v.to_rlp() for v in self._validators])


def parse_validator(text):
    """Parse ``0x<address>`` or ``0x<address>:0x<bls public key>``."""
    addr, sep, bls_public_key = text.strip().partition(':')
    try:
        if not sep:
            return ECDSAValidator(addr)
        if not bls_public_key:
            raise InvalidValidator('Missing BLS public key: %r' % text)
        return BLSValidator(addr, decode_hex(bls_public_key))
    except ValueError:
        raise InvalidValidator('Invalid validator: %r' % text)


def parse_validators(texts):
    return ValidatorSet(parse_validator(t) for t in texts)
