''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`. The
    configuration layer is the only consumer.
'''

# msgspec is optional; orjson is a hard dependency of dictlink, and is used
# whenever msgspec is not installed.

msgspec = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    import orjson


# Both the msgspec 'encode' operation and orjson.dumps return bytes, and
# both decoders accept either bytes or str.

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
else:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
