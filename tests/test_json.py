import json
import dictlink


def test_json_encode_and_decode():
    encode_and_decode(json.dumps, json.loads, dump_is_bytes=False)


def test_dictlink_encode_and_decode():
    encode_and_decode(dictlink.json.dumps, dictlink.json.loads)


def test_decode_error():

    try:
        dictlink.json.loads(b'{"host": ')
    except dictlink.json.DecodeError:
        pass
    else:
        raise AssertionError('malformed JSON was accepted')


def encode_and_decode(dumps, loads, dump_is_bytes=True):

    input_dictionary = dict()
    input_dictionary['host'] = 'dict.org'
    input_dictionary['port'] = 2628
    input_dictionary['timeout'] = 2.5
    input_dictionary['none'] = None
    input_dictionary['list'] = [1, 2, 3, 'a', 'b', None, 'c', 'z']
    input_dictionary['true'] = True
    input_dictionary['false'] = False

    encoded = dumps(input_dictionary)

    if dump_is_bytes:
        assert isinstance(encoded, bytes)
    else:
        assert isinstance(encoded, str)

    # Whitespace in the encoded form varies between libraries, so only the
    # decoded result is compared.

    decoded = loads(encoded)
    assert isinstance(decoded, dict)
    assert decoded == input_dictionary


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
