import os
from functools import lru_cache

from staking_genesis.utils import decode_hex

mydir = os.path.split(__file__)[0]
# Runtime bytecode of the staking contract, compiled with solc 0.8.7
staking_path = os.path.join(mydir, 'staking.bin')


@lru_cache(maxsize=None)
def get_staking_code():
    with open(staking_path) as f:
        return decode_hex(f.read().strip())
