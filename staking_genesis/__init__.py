# -*- coding: utf-8 -*-
# ############# version ##################
from importlib.metadata import version, PackageNotFoundError
# Import slogging to register the TRACE level as soon as possible
from . import slogging  # noqa

try:
    __version__ = version('staking-genesis')
except PackageNotFoundError:
    __version__ = 'undefined'

# ########### endversion ##################
