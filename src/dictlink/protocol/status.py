""" Interpretation of the status line that begins every server reply.
"""

from ..errors import InvalidResponseError
from . import codes


class Status:
    """ A parsed status line: the three-digit *code*, and whatever free text
        followed it as the *detail*.
    """

    __slots__ = ('code', 'detail')

    def __init__(self, code, detail=''):
        self.code = code
        self.detail = detail


    def __eq__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self.code == other.code and self.detail == other.detail


    def __repr__(self):
        return "Status(%d, %r)" % (self.code, self.detail)


    def __str__(self):
        if self.detail:
            return "%d %s" % (self.code, self.detail)
        return str(self.code)


    @property
    def preliminary(self):
        """ True for 1yz codes, which announce that more lines follow.
        """

        return self.code < 200


# end of class Status



def parse(line):
    """ Parse one status line into a :class:`Status`. Raise
        :class:`InvalidResponseError` if the line does not begin with a
        three-digit code in the valid range, optionally followed by a
        space and free text.
    """

    if line is None:
        raise InvalidResponseError('expected a status line, got end of stream')

    digits = line[:3]

    if len(digits) == 3 and digits.isdigit() and digits.isascii():
        pass
    else:
        raise InvalidResponseError('malformed status line: ' + repr(line))

    code = int(digits)

    if code < codes.MINIMUM or code > codes.MAXIMUM:
        raise InvalidResponseError('status code out of range: ' + repr(line))

    remainder = line[3:]

    if remainder == '':
        detail = ''
    elif remainder[0] == ' ':
        detail = remainder[1:]
    else:
        raise InvalidResponseError('malformed status line: ' + repr(line))

    return Status(code, detail)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
