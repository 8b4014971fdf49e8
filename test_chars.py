import io
import unittest

from chars import CharReader
from errors import DecodeError, SourceReadError


class BrokenStream:
    def read(self, n):
        raise OSError("device not ready")


class TestCharReader(unittest.TestCase):

    def test_reads_ascii_then_none(self):
        reader = CharReader(io.BytesIO(b"ab"), 'program')
        self.assertEqual(reader.read_char(), 'a')
        self.assertEqual(reader.read_char(), 'b')
        self.assertIsNone(reader.read_char())

    def test_stays_exhausted(self):
        reader = CharReader(io.BytesIO(b""), 'input')
        self.assertIsNone(reader.read_char())
        self.assertIsNone(reader.read_char())

    def test_multibyte_characters(self):
        reader = CharReader(io.BytesIO("é€😀".encode('utf-8')), 'input')
        self.assertEqual(reader.read_char(), 'é')
        self.assertEqual(reader.read_char(), '€')
        self.assertEqual(reader.read_char(), '😀')
        self.assertIsNone(reader.read_char())

    def test_consumes_only_one_character(self):
        stream = io.BytesIO("λx".encode('utf-8'))
        reader = CharReader(stream, 'input')
        reader.read_char()
        self.assertEqual(stream.tell(), 2)

    def test_invalid_byte(self):
        reader = CharReader(io.BytesIO(b"\xff"), 'program')
        with self.assertRaises(DecodeError) as cm:
            reader.read_char()
        self.assertEqual(cm.exception.source, 'program')

    def test_bad_continuation_byte(self):
        reader = CharReader(io.BytesIO(b"\xe2A"), 'input')
        with self.assertRaises(DecodeError):
            reader.read_char()

    def test_truncated_sequence_at_eof(self):
        reader = CharReader(io.BytesIO(b"\xe2\x82"), 'input')
        with self.assertRaises(DecodeError):
            reader.read_char()

    def test_os_error_is_wrapped(self):
        reader = CharReader(BrokenStream(), 'input')
        with self.assertRaises(SourceReadError) as cm:
            reader.read_char()
        self.assertIsInstance(cm.exception.cause, OSError)


if __name__ == '__main__':
    unittest.main()
