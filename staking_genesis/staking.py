"""
Predeployment of the PoS staking contract.

Builds the storage the staking contract would hold if every genesis
validator had staked through a regular transaction, so the contract can be
placed in the genesis allocation with its code, storage and balance.
"""
from staking_genesis import config as cfg
from staking_genesis.contracts import get_staking_code
from staking_genesis.exceptions import InvalidStakedBalance
from staking_genesis.genesis_helpers import GenesisAccount
from staking_genesis.slogging import get_logger
from staking_genesis.storage import (
    get_address_mapping,
    get_array_base,
    get_index_with_offset,
    set_bytes_to_storage,
)
from staking_genesis.utils import (
    bytes_to_hash,
    encode_hex,
    encode_int32,
    is_numeric,
    parse_uint256_or_hex,
    TT64,
    TT256,
)

log = get_logger('staking.predeploy')


class PredeployParams(object):

    """Bounds on the number of validators, stored verbatim in the contract"""

    def __init__(self, min_validator_count=None, max_validator_count=None):
        if min_validator_count is None:
            min_validator_count = cfg.default_config['MIN_VALIDATOR_COUNT']
        if max_validator_count is None:
            max_validator_count = cfg.default_config['MAX_VALIDATOR_COUNT']
        for name, value in (('min_validator_count', min_validator_count),
                            ('max_validator_count', max_validator_count)):
            if not is_numeric(value) or not 0 <= value < TT64:
                raise ValueError('%s must be an unsigned 64 bit integer, got %r' % (name, value))
        self.min_validator_count = min_validator_count
        self.max_validator_count = max_validator_count

    def __repr__(self):
        return '<PredeployParams(min=%d, max=%d)>' % (
            self.min_validator_count, self.max_validator_count)


class StorageIndexes(object):

    """Storage keys touched by a single validator"""

    def __init__(self, validators_index, validator_bls_public_key_index,
                 address_to_is_validator_index, address_to_staked_amount_index,
                 address_to_validator_index_index):
        self.validators_index = validators_index                            # address[]
        self.validator_bls_public_key_index = validator_bls_public_key_index  # mapping(address => bytes)
        self.address_to_is_validator_index = address_to_is_validator_index  # mapping(address => bool)
        self.address_to_staked_amount_index = address_to_staked_amount_index  # mapping(address => uint256)
        self.address_to_validator_index_index = address_to_validator_index_index  # mapping(address => uint256)


def get_storage_indexes(validator, index):
    address = validator.addr
    return StorageIndexes(
        validators_index=get_index_with_offset(
            get_array_base(cfg.VALIDATORS_SLOT), index),
        validator_bls_public_key_index=get_address_mapping(
            address, cfg.ADDRESS_TO_BLS_PUBLIC_KEY_SLOT),
        address_to_is_validator_index=get_address_mapping(
            address, cfg.ADDRESS_TO_IS_VALIDATOR_SLOT),
        address_to_staked_amount_index=get_address_mapping(
            address, cfg.ADDRESS_TO_STAKED_AMOUNT_SLOT),
        address_to_validator_index_index=get_address_mapping(
            address, cfg.ADDRESS_TO_VALIDATOR_INDEX_SLOT),
    )


def parse_default_staked_balance(value):
    try:
        return parse_uint256_or_hex(value)
    except ValueError as e:
        raise InvalidStakedBalance(
            'unable to parse default staked balance %r: %s' % (value, e)) from e


def predeploy_staking_contract(validators, params, config=None):
    """Genesis account of the staking contract with `validators` staked.

    `validators` is an ordered sequence (or None) of objects with an
    ``addr``; those exposing a ``bls_public_key`` also get their key stored.
    Raises `InvalidStakedBalance` if the configured default stake can't be
    parsed or the total stake does not fit in 256 bits.
    """
    config = cfg.get_config(config)
    default_staked_balance = parse_default_staked_balance(config['DEFAULT_STAKED_BALANCE'])

    storage = {}
    staked_amount = 0
    num_validators = len(validators) if validators is not None else 0
    if default_staked_balance * num_validators >= TT256:
        raise InvalidStakedBalance(
            'total stake of %d validators at %d each overflows uint256' % (
                num_validators, default_staked_balance))

    for idx in range(num_validators):
        validator = validators[idx]
        staked_amount += default_staked_balance

        indexes = get_storage_indexes(validator, idx)

        storage[bytes_to_hash(indexes.validators_index)] = bytes_to_hash(validator.addr)

        bls_public_key = getattr(validator, 'bls_public_key', None)
        if bls_public_key is not None:
            set_bytes_to_storage(
                storage, indexes.validator_bls_public_key_index, bls_public_key)

        storage[bytes_to_hash(indexes.address_to_is_validator_index)] = encode_int32(1)
        storage[bytes_to_hash(indexes.address_to_staked_amount_index)] = \
            encode_int32(default_staked_balance)
        storage[bytes_to_hash(indexes.address_to_validator_index_index)] = encode_int32(idx)

        log.trace('staked validator', index=idx, address=encode_hex(validator.addr),
                  bls=bls_public_key is not None)

    storage[encode_int32(cfg.STAKED_AMOUNT_SLOT)] = encode_int32(staked_amount)
    storage[encode_int32(cfg.VALIDATORS_SLOT)] = encode_int32(num_validators)
    storage[encode_int32(cfg.MIN_NUM_VALIDATORS_SLOT)] = encode_int32(params.min_validator_count)
    storage[encode_int32(cfg.MAX_NUM_VALIDATORS_SLOT)] = encode_int32(params.max_validator_count)

    if not params.min_validator_count <= num_validators <= params.max_validator_count:
        log.warning('validator count outside contract bounds', validators=num_validators,
                    min=params.min_validator_count, max=params.max_validator_count)

    account = GenesisAccount(code=get_staking_code(), storage=storage, balance=staked_amount)
    log.info('predeployed staking contract', validators=num_validators,
             balance=staked_amount, entries=len(storage))
    return account
