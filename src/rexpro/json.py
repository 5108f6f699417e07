''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps` for RexPro
    message bodies.
'''

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available. With
# the right build process this could be determined at build time, instead
# of at run time.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well. None of the
# three escape multibyte characters; the standard library has to be told.

def json_dumps(value):
    return json.dumps(value, ensure_ascii=False, separators=(',', ':')).encode()


if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
else:
    dumps = json_dumps
    loads = json.loads
    DecodeError = json.JSONDecodeError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
