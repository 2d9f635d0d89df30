""" Python client for the DICT protocol (RFC 2229). This includes the
    protocol session engine, which opens a session with a dictionary server
    and answers database, strategy, definition, and match queries, along
    with the records it returns and the errors it raises.
"""

# Utility components.

from . import errors
from . import json
from . import model

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import config
home = config.directory

# Primary public-facing interfaces.

from . import connection
connect = connection.connect

from .connection import Connection
from .errors import (
    DictConnectionError,
    DictError,
    InvalidResponseError,
    NoMatchError,
    UnknownDatabaseError,
)
from .model import ALL, FIRST, Database, Definition, MatchingStrategy

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
