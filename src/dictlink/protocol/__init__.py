"""
dictlink Protocol Layer
=======================

Parsing and framing for the DICT protocol (RFC 2229). Nothing in this
package touches a socket; the session engine in :mod:`dictlink.connection`
feeds it lines read from a transport.

Layer Overview
--------------

Session Engine (connection.py)
    Issues commands, decides what to read next

    │
    ▼
Status Parser (status.py)
    First line of every reply -> Status(code, detail)

Block Reader (block.py)
    Lines up to the "." sentinel

Atom Tokenizer (atoms.py)
    Splits a line into atoms, honouring quotes

Status Codes (codes.py)
    Named constants for every code the client acts on
"""

from . import atoms
from . import block
from . import codes
from . import status


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
