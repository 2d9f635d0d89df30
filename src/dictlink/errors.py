""" Exceptions raised by the dictlink client. Everything raised on purpose
    by this package is a subclass of :class:`DictError`, so that a caller
    can catch the whole family at once.
"""

import builtins


class DictError(Exception):
    """ Base class for all dictlink errors. If the error was prompted by a
        specific server reply, the parsed :class:`Status` is retained as
        the *status* attribute; otherwise *status* is None.
    """

    def __init__(self, message=None, status=None):

        if message is None and status is not None:
            message = "%d %s" % (status.code, status.detail)

        if message is None:
            Exception.__init__(self)
        else:
            Exception.__init__(self, message)

        self.status = status


class DictConnectionError(DictError, builtins.ConnectionError):
    """ The connection could not be established, the handshake failed, or
        the stream broke during an operation. The session is unusable after
        this is raised and should be closed.
    """


class InvalidResponseError(DictError):
    """ The server replied with an unexpected status code, or the reply was
        not framed the way the command requires.
    """


class NoMatchError(DictError):
    """ The server reported status 552: no match. This is a legitimate empty
        result; the session remains usable.
    """


class UnknownDatabaseError(DictError, KeyError):
    """ A database name could not be resolved against the session's
        database directory, or the server rejected it (status 550).
    """

    def __str__(self):
        # KeyError would otherwise repr() the message.
        return Exception.__str__(self)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
