from staking_genesis import config as cfg
from staking_genesis.storage import storage_to_dict
from staking_genesis.utils import encode_hex, int_to_hex, hash32, normalize_address


class GenesisAccount(object):

    """Code, storage and balance assigned to an address in the genesis state"""

    def __init__(self, code=b'', storage=None, balance=0):
        self.code = code
        self.storage = storage if storage is not None else {}
        self.balance = balance
        for k, v in self.storage.items():
            hash32.serialize(k)
            hash32.serialize(v)

    def to_dict(self):
        return {
            "code": encode_hex(self.code),
            "storage": storage_to_dict(self.storage),
            "balance": int_to_hex(self.balance),
        }

    def __eq__(self, other):
        return isinstance(other, GenesisAccount) and \
            (self.code, self.storage, self.balance) == \
            (other.code, other.storage, other.balance)

    def __repr__(self):
        return '<GenesisAccount(code=%d bytes, storage=%d entries, balance=%d)>' % (
            len(self.code), len(self.storage), self.balance)


def mk_staking_alloc(validators, params=None, config=None):
    """Genesis ``alloc`` entry for the predeployed staking contract."""
    from staking_genesis.staking import PredeployParams, predeploy_staking_contract

    params = params or PredeployParams()
    account = predeploy_staking_contract(validators, params, config=config)
    address = normalize_address(cfg.get_config(config)['STAKING_CONTRACT_ADDRESS'])
    return {encode_hex(address): account.to_dict()}
