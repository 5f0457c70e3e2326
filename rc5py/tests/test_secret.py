"""Tests for the secret module."""
import array
import doctest
import unittest

from rc5py import secret
from rc5py.secret import Secret, take_buffer, zeroize


class TestZeroize(unittest.TestCase):
    """Tests of the zeroize function."""

    def test_bytearray(self):
        buffer = bytearray(b"\x01\x02\x03")
        zeroize(buffer)
        self.assertEqual(buffer, bytearray(3))

    def test_memoryview(self):
        buffer = bytearray(b"\xff" * 8)
        zeroize(memoryview(buffer)[2:6])
        self.assertEqual(buffer, bytearray(b"\xff\xff\x00\x00\x00\x00\xff\xff"))

    def test_exported_buffer(self):
        buffer = bytearray(b"\xff" * 4)
        view = memoryview(buffer).toreadonly()
        zeroize(buffer)
        self.assertEqual(bytes(view), bytes(4))

    def test_multibyte_items(self):
        words = array.array("I", [1, 2, 3])
        zeroize(memoryview(words))
        self.assertEqual(words, array.array("I", [0, 0, 0]))

    def test_strided(self):
        buffer = bytearray(b"\xff" * 6)
        zeroize(memoryview(buffer)[::2])
        self.assertEqual(buffer, bytearray(b"\x00\xff\x00\xff\x00\xff"))

    def test_immutable(self):
        with self.assertRaises(TypeError):
            zeroize(b"key")
        with self.assertRaises(TypeError):
            zeroize(memoryview(b"key"))
        with self.assertRaises(TypeError):
            zeroize(16)


class TestTakeBuffer(unittest.TestCase):
    """Tests of the take_buffer function."""

    def test_owned(self):
        key = bytearray(b"key")
        self.assertIs(take_buffer(key), key)

        zeroize(take_buffer(memoryview(key)))
        self.assertEqual(key, bytearray(3))

    def test_copied(self):
        key = b"key"
        buffer = take_buffer(key)
        self.assertIsInstance(buffer, bytearray)
        zeroize(buffer)
        self.assertEqual(key, b"key")

        buffer = take_buffer(memoryview(b"\x01\x02\x03"))
        self.assertIsInstance(buffer, bytearray)
        self.assertEqual(buffer, bytearray(b"\x01\x02\x03"))

    def test_strided(self):
        data = bytearray(b"k\x00e\x00y\x00")
        buffer = take_buffer(memoryview(data)[::2])
        self.assertEqual(buffer, bytearray(b"key"))
        self.assertEqual(data, bytearray(6))

    def test_not_bytes_like(self):
        # an int must not be read as a zero buffer of that length
        for data in [16, "key", [1, 2, 3], None]:
            with self.assertRaises(TypeError):
                take_buffer(data)


class TestSecret(unittest.TestCase):
    """Tests of the Secret class."""

    def test_expose(self):
        s = Secret(bytearray(b"abc"))
        self.assertEqual(len(s), 3)
        view = s.expose_secret()
        self.assertEqual(bytes(view), b"abc")
        with self.assertRaises(TypeError):
            view[0] = 0

    def test_zeroize(self):
        buffer = bytearray(b"abc")
        s = Secret(buffer)
        self.assertFalse(s.zeroized)
        s.zeroize()
        self.assertTrue(s.zeroized)
        self.assertEqual(buffer, bytearray(3))
        self.assertEqual(len(s), 0)
        with self.assertRaises(ValueError):
            s.expose_secret()
        # zeroizing twice is allowed
        s.zeroize()

    def test_context_manager(self):
        buffer = bytearray(b"abc")
        with Secret(buffer) as s:
            self.assertEqual(bytes(s.expose_secret()), b"abc")
        self.assertTrue(s.zeroized)
        self.assertEqual(buffer, bytearray(3))

    def test_repr(self):
        self.assertNotIn("abc", repr(Secret(bytearray(b"abc"))))


# noinspection PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    tests.addTests(doctest.DocTestSuite(secret))
    return tests
