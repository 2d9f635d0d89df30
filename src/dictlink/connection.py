""" The :class:`Connection` is the protocol session engine: it owns one
    transport, issues DICT commands over it, and turns the replies into
    :mod:`dictlink.model` records or typed exceptions.

    A single :class:`Connection` is one sequential session. Every method that
    touches the stream holds the session lock for the full command/reply
    exchange, so concurrent callers are serialized rather than interleaved.
"""

import logging
import re
import threading

from . import config
from . import model
from .errors import (
    DictConnectionError,
    DictError,
    InvalidResponseError,
    NoMatchError,
    UnknownDatabaseError,
)
from .protocol import atoms, block, codes, status
from .transport import TcpTransport, TransportError


log = logging.getLogger(__name__)

_bracketed = re.compile(r'<([^<>]*)>')


class Connection:
    """ Open a session with the DICT server at *host* and *port*, and
        validate its greeting. Any argument left as None is taken from
        :func:`dictlink.config.get`. A pre-built *transport* may be supplied
        instead of a host and port; it will be opened if necessary. Passing
        *host*, *port*, or *timeout* together with a *transport* is a
        ValueError.

        :class:`DictConnectionError` is raised if the server cannot be
        reached or does not greet with status 220; no session exists in
        that case.

        :ivar capabilities: Capabilities advertised in the greeting.
        :ivar message_id: The message id from the greeting, or None.
    """

    def __init__(self, host=None, port=None, timeout=None, transport=None):

        if transport is not None:
            if host is not None or port is not None or timeout is not None:
                raise ValueError('host, port, and timeout cannot be combined with a transport')
        else:
            defaults = config.get()

            if host is None:
                host = defaults.host
            if port is None:
                port = defaults.port
            if timeout is None:
                timeout = defaults.timeout

            transport = TcpTransport(host, port, timeout)

        self.transport = transport
        self.capabilities = tuple()
        self.message_id = None

        self._lock = threading.Lock()
        self._closed = False
        self._databases = dict()
        self._database_list = tuple()

        self._open()


    def __enter__(self):
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


    def __repr__(self):
        if self._closed:
            state = 'closed'
        else:
            state = 'open'

        return "<Connection %r %s>" % (self.transport, state)


    @property
    def closed(self):
        return self._closed


    def _open(self):
        """ Open the transport and check the server greeting.
        """

        try:
            if self.transport.is_open:
                pass
            else:
                self.transport.open()

            greeting = status.parse(self.transport.read_line())
        except (TransportError, DictError) as e:
            self._abandon()
            raise DictConnectionError('cannot open session: ' + str(e)) from e

        log.debug("<< %s", greeting)

        if greeting.code != codes.READY:
            self._abandon()
            raise DictConnectionError('server not ready: ' + str(greeting), status=greeting)

        self._parse_banner(greeting.detail)


    def _parse_banner(self, detail):
        """ The greeting optionally carries a dot-separated capability list
            and a message id, each in angle brackets, at the end of the line.
        """

        bracketed = _bracketed.findall(detail)

        if len(bracketed) == 0:
            return

        last = bracketed[-1]
        if '@' in last:
            self.message_id = '<' + last + '>'
            bracketed = bracketed[:-1]

        if len(bracketed) > 0:
            capabilities = bracketed[-1].split('.')
            capabilities = [capability for capability in capabilities if capability]
            self.capabilities = tuple(capabilities)


    def close(self):
        """ Send QUIT and release the transport. This never raises; any
            failure during shutdown is logged and discarded. Closing an
            already closed session does nothing.
        """

        with self._lock:
            if self._closed:
                return

            try:
                self._send('QUIT')
            except DictError:
                log.debug("QUIT not delivered to %r", self.transport, exc_info=True)

            self._abandon()


    def _abandon(self):
        """ Mark the session unusable and release the transport. Only the
            first call has any effect.
        """

        if self._closed:
            return

        self._closed = True

        try:
            self.transport.close()
        except (TransportError, OSError):
            log.debug("error closing %r", self.transport, exc_info=True)


    def _check_open(self):
        if self._closed:
            raise DictConnectionError('session is closed')


    def _send(self, line):

        log.debug(">> %s", line)

        try:
            self.transport.send_line(line)
        except TransportError as e:
            self._abandon()
            raise DictConnectionError(str(e)) from e


    def _read_line(self):

        try:
            return self.transport.read_line()
        except TransportError as e:
            self._abandon()
            raise DictConnectionError(str(e)) from e


    def _read_block(self):
        return block.read(self._read_line)


    def _read_status(self):
        """ Read and parse the next status line. A malformed line means the
            client no longer knows where it is in the stream, so the session
            is abandoned.
        """

        line = self._read_line()

        try:
            parsed = status.parse(line)
        except InvalidResponseError:
            self._abandon()
            raise

        log.debug("<< %s", parsed)
        return parsed


    def _unexpected(self, received, command):
        """ Build the error for an unexpected status. If the status announced
            a data block of unknown shape the stream cannot be resynchronized
            and the session is abandoned.
        """

        if received.preliminary:
            self._abandon()

        message = "unexpected reply to %s: %s" % (command, received)
        return InvalidResponseError(message, status=received)


    def _finish(self, command):
        """ Consume the terminator line that completes every reply carrying
            a data block. The line carries no data: a blank line or any
            status other than a preliminary one is accepted. A preliminary
            status, or a line that is neither blank nor a status, leaves the
            framing unknown.
        """

        line = self._read_line()

        if line == '':
            log.debug("<< (blank terminator)")
            return

        try:
            received = status.parse(line)
        except InvalidResponseError:
            self._abandon()
            raise

        log.debug("<< %s", received)

        if received.preliminary:
            raise self._unexpected(received, command)


    def _name(self, thing):
        try:
            name = thing.name
        except AttributeError:
            name = str(thing)

        if name == '':
            raise ValueError('database and strategy names cannot be empty')

        return name


    def _show(self, command, expected, empty=None):
        """ Issue a SHOW command whose reply is a single data block, and
            return the block lines. If the server answers with the *empty*
            status code there is no block, and an empty list is returned.
        """

        self._send(command)
        received = self._read_status()

        if empty is not None and received.code == empty:
            return list()

        if received.code != expected:
            raise self._unexpected(received, command)

        lines = self._read_block()
        self._finish(command)
        return lines


    def _pairs(self, lines, command):
        """ Split each line of a SHOW DB or SHOW STRAT block into a
            (name, description) pair.
        """

        pairs = list()

        for line in lines:
            split = atoms.split(line)

            if len(split) == 0:
                raise InvalidResponseError("empty entry in reply to %s" % (command))
            elif len(split) == 1:
                pairs.append((split[0], ''))
            else:
                pairs.append((split[0], split[1]))

        return pairs


    def get_database_list(self):
        """ Return the databases offered by the server, as a tuple of
            :class:`dictlink.model.Database` instances in server order. The
            list is fetched once per session; later calls return the same
            tuple without any network traffic.
        """

        with self._lock:
            self._check_open()
            return self._get_database_list()


    def _get_database_list(self):

        if self._databases:
            return self._database_list

        command = 'SHOW DB'
        lines = self._show(command, codes.DATABASES_PRESENT, codes.NO_DATABASES)

        if len(lines) == 0:
            return tuple()

        # Build the directory locally, so that a failure partway through
        # leaves the session with no directory at all.

        databases = dict()
        for name, description in self._pairs(lines, command):
            databases[name] = model.Database(name, description)

        self._databases = databases
        self._database_list = tuple(databases.values())
        return self._database_list


    def get_database(self, name):
        """ Resolve *name* to a :class:`dictlink.model.Database`, fetching the
            database list if it has not been fetched yet. The special names
            '*' and '!' resolve to :data:`dictlink.model.ALL` and
            :data:`dictlink.model.FIRST`. Raise :class:`UnknownDatabaseError`
            for any other name the server did not list.
        """

        try:
            return model.special[name]
        except KeyError:
            pass

        with self._lock:
            self._check_open()
            self._get_database_list()

            try:
                return self._databases[name]
            except KeyError:
                raise UnknownDatabaseError('unknown database: ' + repr(name)) from None


    def get_strategy_list(self):
        """ Return the matching strategies supported by the server, as a
            tuple of :class:`dictlink.model.MatchingStrategy` instances. If
            the server lists a strategy name more than once only the first
            entry is kept. The result is not cached.
        """

        command = 'SHOW STRAT'

        with self._lock:
            self._check_open()
            lines = self._show(command, codes.STRATEGIES_AVAILABLE, codes.NO_STRATEGIES)

        strategies = dict()
        for name, description in self._pairs(lines, command):
            if name in strategies:
                continue
            strategies[name] = model.MatchingStrategy(name, description)

        return tuple(strategies.values())


    def get_definitions(self, word, database=model.ALL):
        """ Return every definition of *word* in *database*, as a list of
            :class:`dictlink.model.Definition` instances in the order the
            server sent them. The *database* may be a
            :class:`dictlink.model.Database` or a bare name, including the
            special names '*' (all databases) and '!' (first database with
            a match).

            Raise :class:`NoMatchError` if the server has no definition.
        """

        name = self._name(database)

        with self._lock:
            self._check_open()

            # Definitions refer back to Database records, not bare names.
            self._get_database_list()

            command = 'DEFINE ' + name + ' ' + atoms.enquote(word)
            self._send(command)
            received = self._read_status()

            if received.code == codes.NO_MATCH:
                raise NoMatchError('no match for ' + repr(word), status=received)

            if received.code != codes.DEFINITIONS_RETRIEVED:
                raise self._unexpected(received, command)

            definitions = list()
            unknown = None

            while True:
                received = self._read_status()
                if received.code != codes.DEFINITION_FOLLOWS:
                    break

                split = atoms.split(received.detail)

                try:
                    headword = split[0]
                    database_name = split[1]
                except IndexError:
                    self._abandon()
                    raise InvalidResponseError('malformed definition header: ' + repr(received.detail), status=received) from None

                try:
                    found = self._databases[database_name]
                except KeyError:
                    # Keep reading; the rest of the reply must be consumed
                    # before the error can be raised.
                    if unknown is None:
                        unknown = database_name
                    block.skip(self._read_line)
                    continue

                definition = model.Definition(headword, found)
                for line in block.lines(self._read_line):
                    definition.append(line)

                definition.freeze()
                definitions.append(definition)

            if received.code != codes.OK:
                raise self._unexpected(received, command)

        if unknown is not None:
            raise UnknownDatabaseError('definition from unknown database: ' + repr(unknown))

        return definitions


    def get_match_list(self, word, strategy, database=model.ALL):
        """ Return the words in *database* matching *word* under *strategy*,
            as a list in server order with duplicates removed. Both
            *strategy* and *database* may be records or bare names.

            Raise :class:`NoMatchError` if nothing matched.
        """

        strategy_name = self._name(strategy)
        database_name = self._name(database)

        command = "MATCH %s %s %s" % (database_name, strategy_name, atoms.encode(word))

        with self._lock:
            self._check_open()
            self._send(command)
            received = self._read_status()

            # 552 is an expected outcome, check it before treating anything
            # else as a failure.

            if received.code == codes.NO_MATCH:
                raise NoMatchError('no match for ' + repr(word), status=received)

            if received.code != codes.MATCHES_FOUND:
                raise self._unexpected(received, command)

            lines = self._read_block()
            self._finish(command)

        matches = dict()
        for line in lines:
            split = atoms.split(line)
            if len(split) < 2:
                raise InvalidResponseError('malformed match entry: ' + repr(line))

            matches[split[1]] = None

        return list(matches)


    def get_database_info(self, database):
        """ Return the server's description of *database* as text. The
            special databases are described locally.
        """

        name = self._name(database)

        try:
            special = model.special[name]
        except KeyError:
            pass
        else:
            return special.description

        command = 'SHOW INFO ' + name

        with self._lock:
            self._check_open()
            self._send(command)
            received = self._read_status()

            if received.code == codes.INVALID_DATABASE:
                raise UnknownDatabaseError('invalid database: ' + repr(name), status=received)

            if received.code != codes.DATABASE_INFO:
                raise self._unexpected(received, command)

            lines = self._read_block()
            self._finish(command)

        return '\n'.join(lines)


    def get_server_info(self):
        """ Return the server's free-form description of itself.
        """

        with self._lock:
            self._check_open()
            lines = self._show('SHOW SERVER', codes.SERVER_INFO)

        return '\n'.join(lines)


# end of class Connection



def connect(host=None, port=None, timeout=None):
    """ Open and return a new :class:`Connection`. Arguments left as None
        are taken from the local configuration.
    """

    return Connection(host, port, timeout)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
