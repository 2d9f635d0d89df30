"""Status code constants.

Keep these in one place to avoid bare numbers in the reply handling.
"""

# Preliminary replies: a data block follows.
DATABASES_PRESENT = 110
STRATEGIES_AVAILABLE = 111
DATABASE_INFO = 112
SERVER_INFO = 114
DEFINITIONS_RETRIEVED = 150
DEFINITION_FOLLOWS = 151
MATCHES_FOUND = 152

# Completion replies.
READY = 220
CLOSING = 221
OK = 250

# Negative replies with no data.
INVALID_DATABASE = 550
INVALID_STRATEGY = 551
NO_MATCH = 552
NO_DATABASES = 554
NO_STRATEGIES = 555

MINIMUM = 100
MAXIMUM = 599
