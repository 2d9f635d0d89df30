import pytest

import dictlink
from dictlink.protocol import status


def test_parse():

    parsed = status.parse('220 dict.org dictd <auth.mime> <1@dict.org>')
    assert parsed.code == 220
    assert parsed.detail == 'dict.org dictd <auth.mime> <1@dict.org>'

    parsed = status.parse('250 ok')
    assert parsed == status.Status(250, 'ok')
    assert parsed.preliminary == False

    parsed = status.parse('150 1 definitions retrieved')
    assert parsed.code == 150
    assert parsed.preliminary == True


def test_code_only():

    parsed = status.parse('250')
    assert parsed.code == 250
    assert parsed.detail == ''
    assert str(parsed) == '250'


def test_str():

    assert str(status.Status(552, 'no match')) == '552 no match'


def test_malformed():

    bad_lines = ('', 'ok', '25 ok', '25x ok', '250ok', 'abc def', '.', '２５０ ok')

    for line in bad_lines:
        with pytest.raises(dictlink.InvalidResponseError):
            status.parse(line)


def test_out_of_range():

    for line in ('000 zero', '099 low', '600 high', '999 high'):
        with pytest.raises(dictlink.InvalidResponseError):
            status.parse(line)


def test_end_of_stream():

    with pytest.raises(dictlink.InvalidResponseError):
        status.parse(None)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
