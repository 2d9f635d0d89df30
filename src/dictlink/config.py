""" Client-side configuration. Defaults for the server host, port, and
    socket timeout can be stored as JSON in ``client.json`` inside the
    configuration directory, and overridden with environment variables.
"""

import os
import threading

from . import json


default_host = 'localhost'

# The well-known DICT port, per RFC 2229.

default_port = 2628

filename = 'client.json'

_cache = dict()
_cache_lock = threading.Lock()


class Configuration:
    """ A convenience class to represent dictlink client defaults. Values
        are resolved in order: environment variables (``DICTLINK_HOST``,
        ``DICTLINK_PORT``), then the ``client.json`` file in *base_dir*, then
        the built-in defaults.

        :ivar host: The default server host name.
        :ivar port: The default server port number.
        :ivar timeout: The socket timeout in seconds, or None to block.
    """

    def __init__(self, base_dir):

        self.base_dir = base_dir
        self.host = default_host
        self.port = default_port
        self.timeout = None

        self.load()


    def __repr__(self):
        return "Configuration(host=%r, port=%r, timeout=%r)" % (self.host, self.port, self.timeout)


    def load(self):
        """ Load the configuration from disk, if there is any, and apply any
            overrides from the environment.
        """

        if self.base_dir is not None:
            target = os.path.join(self.base_dir, filename)
            block = self._load_file(target)
        else:
            block = None

        if block:
            self.update(block)

        try:
            host = os.environ['DICTLINK_HOST']
        except KeyError:
            pass
        else:
            self.host = host

        try:
            port = os.environ['DICTLINK_PORT']
        except KeyError:
            pass
        else:
            self.port = _to_port(port)


    def _load_file(self, target):

        try:
            raw_json = open(target, 'rb').read()
        except FileNotFoundError:
            return None

        try:
            block = json.loads(raw_json)
        except json.DecodeError as e:
            raise ValueError('malformed configuration file: ' + target) from e

        if isinstance(block, dict):
            pass
        else:
            raise ValueError('configuration must be a JSON object: ' + target)

        return block


    def update(self, block):
        """ Apply the values in the dictionary *block*. Unknown keys are
            ignored.
        """

        try:
            host = block['host']
        except KeyError:
            pass
        else:
            self.host = str(host)

        try:
            port = block['port']
        except KeyError:
            pass
        else:
            self.port = _to_port(port)

        try:
            timeout = block['timeout']
        except KeyError:
            pass
        else:
            if timeout is not None:
                timeout = float(timeout)
                if timeout <= 0:
                    raise ValueError('timeout must be positive: ' + repr(timeout))
            self.timeout = timeout


    def save(self):
        """ Write the current values to ``client.json`` in the configuration
            directory.
        """

        if self.base_dir is None:
            raise RuntimeError('cannot determine location of dictlink configuration files')

        if os.path.exists(self.base_dir):
            pass
        else:
            os.makedirs(self.base_dir, mode=0o775)

        block = dict()
        block['host'] = self.host
        block['port'] = self.port
        block['timeout'] = self.timeout

        target = os.path.join(self.base_dir, filename)
        writer = open(target, 'wb')
        writer.write(json.dumps(block))
        writer.close()


# end of class Configuration



def _to_port(port):

    port = int(port)
    if port < 1 or port > 65535:
        raise ValueError('invalid port number: ' + repr(port))

    return port



def clear():
    """ Discard the cached :class:`Configuration`, so that the next call to
        :func:`get` reloads it from disk and the environment.
    """

    _cache_lock.acquire()
    try:
        _cache.clear()
    finally:
        _cache_lock.release()



def directory(default=None):
    """ Return the directory location where we should be loading and/or saving
        configuration files. This defaults to ``$HOME/.dictlink``, but can be
        overridden by calling this method with a valid path, or by setting
        the ``DICTLINK_HOME`` environment variable. Note that changes to the
        environment variable will be ignored unless it is set prior to the
        first invocation of this method. None is returned if neither
        ``DICTLINK_HOME`` nor ``HOME`` is set.
    """

    if default is not None:
        default = str(default)
        default = os.path.expandvars(default)

        if os.path.isabs(default):
            pass
        else:
            raise ValueError('the default directory must be an absolute path')

        os.environ['DICTLINK_HOME'] = default
        directory.found = default


    found = directory.found

    if found is not None:
        return found

    try:
        found = os.environ['DICTLINK_HOME']
    except KeyError:
        pass
    else:
        directory.found = found
        return found

    try:
        home = os.environ['HOME']
    except KeyError:
        return None

    found = os.path.join(home, '.dictlink')

    directory.found = found
    return found

directory.found = None



def get():
    """ Retrieve the cached :class:`Configuration` instance, loading it on
        first use.
    """

    try:
        config = _cache['client']
    except KeyError:
        _cache_lock.acquire()

        try:
            config = _cache['client']
        except KeyError:
            config = Configuration(directory())
            _cache['client'] = config
        finally:
            _cache_lock.release()

    return config


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
