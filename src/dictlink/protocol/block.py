""" Reading the dot-terminated text blocks that follow preliminary replies.
    Every command with a multi-line reply uses these helpers, so that the
    framing is handled identically everywhere.
"""

sentinel = '.'


def lines(read_line):
    """ Yield the lines of one data block, calling *read_line* until it
        returns the sentinel line. The sentinel itself is consumed but not
        yielded; all other lines are yielded verbatim. The generator must be
        exhausted to leave the stream at the end of the block.
    """

    while True:
        line = read_line()
        if line == sentinel:
            return
        yield line



def read(read_line):
    """ Read one complete data block, returning its lines as a list.
    """

    return list(lines(read_line))



def skip(read_line):
    """ Consume one complete data block, discarding its contents. Returns
        the number of lines discarded.
    """

    count = 0
    for line in lines(read_line):
        count += 1

    return count


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
