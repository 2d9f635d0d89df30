""" Value records populated by a :class:`dictlink.Connection`: databases,
    matching strategies, and definitions.
"""


class Database:
    """ A lexical database offered by a server. A :class:`Database` is
        immutable once created; two instances with the same *name* and
        *description* compare equal.
    """

    __slots__ = ('name', 'description')

    def __init__(self, name, description=''):
        object.__setattr__(self, 'name', str(name))
        object.__setattr__(self, 'description', str(description))


    def __setattr__(self, name, value):
        raise AttributeError(type(self).__name__ + ' instances are immutable')


    def __eq__(self, other):
        if not isinstance(other, Database):
            return NotImplemented
        return self.name == other.name and self.description == other.description


    def __hash__(self):
        return hash((Database, self.name, self.description))


    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self.name, self.description)


    @property
    def special(self):
        """ True if this is one of the wildcard databases, '*' or '!', that
            only have meaning to the server.
        """

        return self.name in special


# end of class Database



class MatchingStrategy:
    """ A server-defined strategy for matching words against a pattern,
        such as 'exact' or 'prefix'. Immutable, like :class:`Database`.
    """

    __slots__ = ('name', 'description')

    def __init__(self, name, description=''):
        object.__setattr__(self, 'name', str(name))
        object.__setattr__(self, 'description', str(description))


    def __setattr__(self, name, value):
        raise AttributeError(type(self).__name__ + ' instances are immutable')


    def __eq__(self, other):
        if not isinstance(other, MatchingStrategy):
            return NotImplemented
        return self.name == other.name and self.description == other.description


    def __hash__(self):
        return hash((MatchingStrategy, self.name, self.description))


    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self.name, self.description)


# end of class MatchingStrategy



class Definition:
    """ One definition of *word* as found in *database*. The body is
        accumulated one line at a time via :func:`append` while the
        response is being read; :func:`freeze` is called once the block is
        complete, after which the definition is read-only.

        :ivar word: The headword, as reported by the server.
        :ivar database: The :class:`Database` the definition came from.
        :ivar lines: The body, as a tuple of lines.
    """

    def __init__(self, word, database):
        self.word = word
        self.database = database
        self._lines = list()
        self._frozen = False


    def __repr__(self):
        return "Definition(%r, %r, %d lines)" % (self.word, self.database.name, len(self._lines))


    def append(self, line):
        if self._frozen:
            raise RuntimeError('cannot append to a frozen Definition')

        self._lines.append(line)


    def freeze(self):
        if self._frozen:
            return

        self._lines = tuple(self._lines)
        self._frozen = True


    @property
    def frozen(self):
        return self._frozen


    @property
    def lines(self):
        return tuple(self._lines)


    @property
    def body(self):
        """ The definition text, lines joined with newlines.
        """

        return '\n'.join(self._lines)


# end of class Definition


ALL = Database('*', 'All databases')
FIRST = Database('!', 'First matching database')

special = dict()
special[ALL.name] = ALL
special[FIRST.name] = FIRST


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
