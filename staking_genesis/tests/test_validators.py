import pytest
import rlp

from staking_genesis.exceptions import InvalidAddress, InvalidValidator
from staking_genesis.validators import (
    BLSValidator,
    ECDSAValidator,
    ValidatorSet,
    parse_validator,
    parse_validators,
)

ADDR_HEX = '0x' + '11' * 20
BLS_HEX = '0x' + 'ab' * 48


def test_parse_ecdsa_validator():
    v = parse_validator(ADDR_HEX)
    assert isinstance(v, ECDSAValidator)
    assert not hasattr(v, 'bls_public_key')
    assert v.addr == b'\x11' * 20
    assert str(v) == ADDR_HEX


def test_parse_bls_validator():
    v = parse_validator('%s:%s' % (ADDR_HEX, BLS_HEX))
    assert isinstance(v, BLSValidator)
    assert v.addr == b'\x11' * 20
    assert v.bls_public_key == b'\xab' * 48
    assert str(v) == '%s:%s' % (ADDR_HEX, BLS_HEX)


def test_parse_without_prefix():
    assert parse_validator('11' * 20) == ECDSAValidator(b'\x11' * 20)


@pytest.mark.parametrize('text', [
    '0x1234',
    '0x' + 'zz' * 20,
    ADDR_HEX + ':',
    ADDR_HEX + ':0xabc',
    ADDR_HEX + ':0xnothex',
])
def test_parse_invalid(text):
    with pytest.raises(InvalidValidator):
        parse_validator(text)


def test_invalid_address_bytes():
    with pytest.raises(InvalidAddress):
        ECDSAValidator(b'\x11' * 19)


def test_parse_validators_keeps_order():
    texts = ['0x' + '%02x' % i * 20 for i in (3, 1, 2)]
    validators = parse_validators(texts)
    assert len(validators) == 3
    assert validators.addresses() == [bytes([3]) * 20, bytes([1]) * 20, bytes([2]) * 20]
    assert validators.at(1) == validators[1] == ECDSAValidator(bytes([1]) * 20)
    assert list(validators) == [validators[0], validators[1], validators[2]]


def test_validator_set_rejects_non_validators():
    with pytest.raises(InvalidValidator):
        ValidatorSet([b'\x11' * 20])


def test_equality():
    assert ECDSAValidator(b'\x11' * 20) != BLSValidator(b'\x11' * 20, b'')
    assert BLSValidator(b'\x11' * 20, b'\x01') != BLSValidator(b'\x11' * 20, b'\x02')
    assert BLSValidator(b'\x11' * 20, b'\x01') == BLSValidator(ADDR_HEX, '0x01')
    assert ValidatorSet([ECDSAValidator(b'\x11' * 20)]) == parse_validators([ADDR_HEX])


def test_rlp_encode_ecdsa_set():
    validators = parse_validators([ADDR_HEX, '0x' + '22' * 20])
    assert rlp.decode(validators.rlp_encode()) == [b'\x11' * 20, b'\x22' * 20]


def test_rlp_encode_bls_set():
    validators = ValidatorSet([BLSValidator(b'\x11' * 20, b'\xab' * 48)])
    assert rlp.decode(validators.rlp_encode()) == [[b'\x11' * 20, b'\xab' * 48]]


def test_rlp_encode_empty_set():
    assert ValidatorSet().rlp_encode() == b'\xc0'
