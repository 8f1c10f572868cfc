from types import MappingProxyType

from staking_genesis import utils


# Largest integer a JSON / JavaScript consumer represents exactly
MAX_SAFE_JS_INT = 2 ** 53 - 1

# Storage slots of the staking contract state variables, in declaration order
VALIDATORS_SLOT = 0                     # address[]
ADDRESS_TO_IS_VALIDATOR_SLOT = 1        # mapping(address => bool)
ADDRESS_TO_STAKED_AMOUNT_SLOT = 2       # mapping(address => uint256)
ADDRESS_TO_VALIDATOR_INDEX_SLOT = 3     # mapping(address => uint256)
STAKED_AMOUNT_SLOT = 4                  # uint256
MIN_NUM_VALIDATORS_SLOT = 5             # uint256
MAX_NUM_VALIDATORS_SLOT = 6             # uint256
ADDRESS_TO_BLS_PUBLIC_KEY_SLOT = 7      # mapping(address => bytes)

STORAGE_SLOTS = MappingProxyType(dict(
    validators=VALIDATORS_SLOT,
    address_to_is_validator=ADDRESS_TO_IS_VALIDATOR_SLOT,
    address_to_staked_amount=ADDRESS_TO_STAKED_AMOUNT_SLOT,
    address_to_validator_index=ADDRESS_TO_VALIDATOR_INDEX_SLOT,
    staked_amount=STAKED_AMOUNT_SLOT,
    min_num_validators=MIN_NUM_VALIDATORS_SLOT,
    max_num_validators=MAX_NUM_VALIDATORS_SLOT,
    address_to_bls_public_key=ADDRESS_TO_BLS_PUBLIC_KEY_SLOT,
))


default_config = dict(
    # Genesis address of the predeployed staking contract
    STAKING_CONTRACT_ADDRESS=utils.normalize_address(
        '0x0000000000000000000000000000000000001001'),
    # Amount staked by every genesis validator, parsed at construction time
    DEFAULT_STAKED_BALANCE='0x0',
    # Bounds on the validator set size enforced by the contract at runtime
    MIN_VALIDATOR_COUNT=1,
    MAX_VALIDATOR_COUNT=MAX_SAFE_JS_INT,
)


def get_config(overrides=None):
    config = dict(default_config)
    if overrides:
        config.update((k, v) for k, v in overrides.items() if k in default_config)
    return config
