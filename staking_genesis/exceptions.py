class StakingGenesisError(Exception):
    pass


class InvalidStakedBalance(StakingGenesisError):
    pass


class InvalidValidator(StakingGenesisError):
    pass


class InvalidAddress(InvalidValidator):
    pass
