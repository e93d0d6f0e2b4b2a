"""
Library-wide defaults, read by the fittings when they are constructed.

The values here are the shipped defaults. Call configure() to apply the pipefitting
configuration files (shipped, platform and ~/pipefitting.cfg overrides) to this module.
"""
import sys

from pipefitting.config.config import configure_module

config_name = 'pipefitting'

# the mode a new Queue starts in, SORT or FIFO
queue_mode = 'SORT'

# the name given to a Filter constructed without one
filter_name = 'Unnamed Filter'


def configure():
    configure_module(sys.modules[__name__], config_name)
