"""Tests for the operation and context modules."""
import doctest
import threading
import unittest

from hypothesis import given
from hypothesis.strategies import integers

from rc5py.bitvector import context, operation
from rc5py.bitvector.context import Cache, Validation
from rc5py.bitvector.core import Constant
from rc5py.bitvector.operation import (
    BvXor, BvAdd, BvSub, RotateLeft, RotateRight, Extract, Concat, ZeroExtend
)

MIN_SIZE = 2
MAX_SIZE = 128


simple_op = {BvXor, BvAdd, BvSub}


class TestOperation(unittest.TestCase):
    """Test for the Operation class and subclasses."""

    def test_evaluation(self):
        x = Constant(0xf0, 8)
        y = Constant(0x1f, 8)

        for op in simple_op:
            result = op(x, y)
            self.assertIsInstance(result, Constant)
            self.assertEqual(result.width, op.output_width(x, y))
            self.assertEqual(op(x, 0x1f), result)

        self.assertEqual(RotateLeft(x, 4), Constant(0x0f, 8))
        self.assertEqual(Concat(x, y).width, 16)
        self.assertEqual(Extract(x, 7, 4).width, 4)
        self.assertEqual(ZeroExtend(x, 0), x)

    def test_invalid_operands(self):
        x = Constant(1, 8)

        with self.assertRaises(AssertionError):
            BvAdd(x, Constant(1, 16))
        with self.assertRaises(AssertionError):
            RotateLeft(x, 8)
        with self.assertRaises(AssertionError):
            RotateRight(x, -1)
        with self.assertRaises(AssertionError):
            Extract(x, 2, 3)
        with self.assertRaises(TypeError):
            RotateLeft(1, 1)
        with self.assertRaises(TypeError):
            BvXor(1, 1)

    @given(
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=0),
        integers(min_value=0),
    )
    def test_arithmetic(self, width, x, y):
        modulus = 2 ** width
        x, y = x % modulus, y % modulus
        bvx = Constant(x, width)
        bvy = Constant(y, width)

        self.assertEqual(bvx ^ bvy, x ^ y)
        self.assertEqual(bvx + bvy, (x + y) % modulus)
        self.assertEqual(bvx - bvy, (x - y) % modulus)
        self.assertEqual(y - bvx, (y - x) % modulus)
        self.assertEqual((bvx + bvy) - bvy, bvx)
        self.assertEqual((bvx ^ bvy) ^ bvy, bvx)

    @given(
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=0),
        integers(min_value=0),
    )
    def test_rotations(self, width, x, r):
        x = Constant(x % 2 ** width, width)
        r = r % width

        self.assertEqual(RotateRight(RotateLeft(x, r), r), x)
        self.assertEqual(RotateLeft(x, r), RotateRight(x, (width - r) % width))

        bits = x.bin()[2:]
        self.assertEqual(RotateLeft(x, r).bin()[2:], bits[r:] + bits[:r])

    @given(
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=0),
        integers(min_value=0),
    )
    def test_concat_extract(self, wx, wy, x, y):
        x = Constant(x % 2 ** wx, wx)
        y = Constant(y % 2 ** wy, wy)
        xy = Concat(x, y)

        self.assertEqual(xy.width, wx + wy)
        self.assertEqual(xy[wx + wy - 1:wy], x)
        self.assertEqual(xy[wy - 1:0], y)
        self.assertEqual(ZeroExtend(y, wx)[wy - 1:], y)
        self.assertEqual(int(ZeroExtend(y, wx)), int(y))


class TestContext(unittest.TestCase):
    """Tests of the Cache and Validation contexts."""

    def test_nested(self):
        self.assertTrue(Cache.current_context)
        with Cache(False):
            self.assertFalse(Cache.current_context)
            with Cache(True):
                self.assertTrue(Cache.current_context)
            self.assertFalse(Cache.current_context)
        self.assertTrue(Cache.current_context)

    def test_no_validation(self):
        x = Constant(1, 8)
        # the cache ignores the Validation context
        with Cache(False), Validation(False):
            self.assertEqual(x + x, Constant(2, 8))
            self.assertEqual(RotateLeft(x, 9), Constant(2, 8))
        with self.assertRaises(AssertionError):
            RotateLeft(x, 9)

    def test_no_cache(self):
        x = Constant(0x12, 8)
        with Cache(False):
            self.assertEqual(BvAdd(x, x), Constant(0x24, 8))

    def test_thread_local(self):
        seen = []

        def worker():
            seen.append((Cache.current_context, Validation.current_context))

        with Cache(False), Validation(False):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()
            self.assertFalse(Cache.current_context)

        self.assertEqual(seen, [(True, True)])


# noinspection PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    tests.addTests(doctest.DocTestSuite(operation))
    tests.addTests(doctest.DocTestSuite(context))
    return tests
