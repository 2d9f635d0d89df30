""" Splitting protocol lines into atoms, and quoting words for commands.

    An atom is a run of non-whitespace characters, or a quoted string. Quoted
    strings may use either double or single quotes; the quotes are stripped,
    and a backslash escapes the character that follows it.
"""

_quotes = ('"', "'")
_whitespace = (' ', '\t')


def split(line):
    """ Return the atoms in *line* as a list of strings. An unterminated
        quoted string runs to the end of the line.
    """

    atoms = list()
    current = list()
    quote = None
    in_atom = False
    escaped = False

    for character in line:

        if escaped:
            current.append(character)
            escaped = False
            continue

        if quote is not None:
            if character == '\\':
                escaped = True
            elif character == quote:
                quote = None
            else:
                current.append(character)
            continue

        if character in _whitespace:
            if in_atom:
                atoms.append(''.join(current))
                current = list()
                in_atom = False
            continue

        in_atom = True

        if character in _quotes:
            quote = character
        else:
            current.append(character)

    if in_atom:
        atoms.append(''.join(current))

    return atoms



def enquote(word):
    """ Wrap *word* in double quotes, escaping any embedded backslashes and
        double quotes, so that it is transmitted as a single atom.
    """

    word = word.replace('\\', '\\\\')
    word = word.replace('"', '\\"')
    return '"' + word + '"'



def encode(word):
    """ Return *word* as it should appear in a command: bare if it is a
        plain run of characters, otherwise quoted with :func:`enquote`.
    """

    if word == '':
        return enquote(word)

    for character in word:
        if character in _whitespace or character in _quotes or character == '\\':
            return enquote(word)

    return word


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
