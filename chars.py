import codecs

from errors import DecodeError, SourceReadError


class CharReader:
    """Pulls one UTF-8 character at a time from a binary stream."""

    def __init__(self, stream, name):
        self.stream = stream
        self.name = name
        self.decoder = codecs.getincrementaldecoder('utf-8')()
        self.exhausted = False

    def read_char(self):
        """Next character, or None once the stream has no more data."""
        if self.exhausted:
            return None
        while True:
            try:
                byte = self.stream.read(1)
            except OSError as e:
                raise SourceReadError(self.name, e) from e
            try:
                if not byte:
                    self.exhausted = True
                    # Raises on a multi-byte sequence cut short by EOF
                    self.decoder.decode(b'', final=True)
                    return None
                char = self.decoder.decode(byte)
            except UnicodeDecodeError as e:
                self.decoder.reset()
                raise DecodeError(self.name) from e
            if char:
                return char
