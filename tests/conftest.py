import socket
import threading

import pytest

import dictlink
from dictlink.transport import Transport, TransportConnectionError


greeting = '220 test.example dictd 1.13 <auth.mime> <42.7@test.example>'


class ScriptedTransport(Transport):
    """ An in-memory transport that replays a fixed sequence of reply lines
        and records every line sent to it.
    """

    def __init__(self, replies):
        self.replies = list(replies)
        self.sent = list()
        self.opened = 0
        self.closed = 0
        self._open = False

    @property
    def is_open(self):
        return self._open

    def open(self):
        self.opened += 1
        self._open = True

    def close(self):
        self.closed += 1
        self._open = False

    def send_line(self, line):
        if self._open == False:
            raise TransportConnectionError('transport is not open')
        self.sent.append(line)

    def read_line(self):
        if self._open == False:
            raise TransportConnectionError('transport is not open')
        if len(self.replies) == 0:
            raise TransportConnectionError('script exhausted')
        return self.replies.pop(0)

    def feed(self, *lines):
        self.replies.extend(lines)


@pytest.fixture
def scripted():
    """ Return a factory that opens a :class:`dictlink.Connection` over a
        :class:`ScriptedTransport`. The greeting is supplied automatically.
    """

    def factory(*replies, banner=greeting):
        transport = ScriptedTransport((banner,) + replies)
        connection = dictlink.Connection(transport=transport)
        return connection, transport

    return factory


database_block = (
    '110 3 databases present',
    'wn "WordNet (r) 3.0 (2006)"',
    'gcide "The Collaborative International Dictionary of English"',
    'jargon "The Jargon File (version 4.4.7, 29 Dec 2003)"',
    '.',
    '250 ok',
)


class DictServer:
    """ A minimal threaded DICT server on the loopback interface. Each
        command received is looked up in *replies*; unknown commands get a
        500 reply. Every command is recorded in *received*.
    """

    def __init__(self, replies, banner=greeting):
        self.replies = replies
        self.banner = banner
        self.received = list()

        self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.socket.bind(('127.0.0.1', 0))
        self.socket.listen(4)

        self.port = self.socket.getsockname()[1]
        self.thread = threading.Thread(target=self.run)
        self.thread.daemon = True
        self.thread.start()


    def run(self):

        while True:
            try:
                client, address = self.socket.accept()
            except OSError:
                break

            handler = threading.Thread(target=self.handle, args=(client,))
            handler.daemon = True
            handler.start()


    def handle(self, client):

        reader = client.makefile('rb')
        self.send(client, (self.banner,))

        while True:
            try:
                raw = reader.readline()
            except OSError:
                break

            if raw == b'':
                break

            command = raw.decode('utf-8').rstrip('\r\n')
            self.received.append(command)

            if command == 'QUIT':
                self.send(client, ('221 bye',))
                break

            try:
                reply = self.replies[command]
            except KeyError:
                reply = ('500 unknown command',)

            self.send(client, reply)

        reader.close()
        client.close()


    def send(self, client, lines):
        data = ''.join(line + '\r\n' for line in lines)
        try:
            client.sendall(data.encode('utf-8'))
        except OSError:
            pass


    def cleanup(self):
        try:
            self.socket.close()
        except OSError:
            pass


@pytest.fixture
def dict_server():
    """ Return a factory starting a :class:`DictServer` with the given
        canned replies; every server started is shut down afterwards.
    """

    servers = list()

    def factory(replies, banner=greeting):
        server = DictServer(replies, banner)
        servers.append(server)
        return server

    yield factory

    for server in servers:
        server.cleanup()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """ Point the configuration directory at an empty temporary directory
        and discard any cached configuration, before and after the test.
    """

    monkeypatch.delenv('DICTLINK_HOST', raising=False)
    monkeypatch.delenv('DICTLINK_PORT', raising=False)
    monkeypatch.setenv('DICTLINK_HOME', str(tmp_path))
    monkeypatch.setattr(dictlink.config.directory, 'found', None)
    dictlink.config.directory(str(tmp_path))
    dictlink.config.clear()

    yield tmp_path

    dictlink.config.clear()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
