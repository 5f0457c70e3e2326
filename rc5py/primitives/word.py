"""Words of the RC5 family of block ciphers."""
import enum
import functools

from rc5py import errors
from rc5py.bitvector.core import Constant
from rc5py.bitvector.operation import Concat, RotateLeft, RotateRight, ZeroExtend


class WordSize(enum.Enum):
    word_16 = 16
    word_32 = 32
    word_64 = 64
    word_128 = 128


class Word(object):
    """Represent the w-bit registers RC5 operates on.

    A word is a `Constant` of bit-width ``width``. Modular addition,
    modular subtraction and XOR are the ``+``, ``-`` and ``^`` operators
    of `Constant`; this class provides the remaining operations and
    the two magic constants of the key schedule

    - :math:`P_w = Odd((e - 2) 2^w)`
    - :math:`Q_w = Odd((\\phi - 1) 2^w)`

    where :math:`e` is the base of natural logarithms and :math:`\\phi`
    the golden ratio. They are given as fixed tables, one subclass per
    supported width.

        >>> from rc5py.primitives.word import Word32
        >>> Word32.P, Word32.Q
        (0xb7e15163, 0x9e3779b9)
        >>> Word32.to_le_bytes(Word32.from_le_bytes(b"\\x01\\x02\\x03\\x04"))
        b'\\x01\\x02\\x03\\x04'

    Attributes:
        byte_width: the number of bytes of a word
        width: the bit-width of a word
        P: the first magic constant
        Q: the second magic constant

    """
    byte_width = None
    width = None
    P = None
    Q = None

    @classmethod
    def zero(cls):
        return Constant(0, cls.width)

    @classmethod
    def from_byte(cls, byte):
        """Zero-extend an 8-bit `Constant` to a word."""
        return ZeroExtend(byte, cls.width - 8)

    @classmethod
    def rotation_amount(cls, x):
        """Return the value of the word *x* reduced modulo the bit-width."""
        if not isinstance(x, Constant) or x.width != cls.width or int(x) >= 2 ** 128:
            raise errors.InvalidWordSize("cannot derive a rotation amount from {!r}".format(x))
        return int(x) % cls.width

    @classmethod
    def rotate_left(cls, x, amount):
        return RotateLeft(x, amount % cls.width)

    @classmethod
    def rotate_right(cls, x, amount):
        return RotateRight(x, amount % cls.width)

    @classmethod
    def from_le_bytes(cls, data):
        """Convert a little-endian byte string to a word."""
        if len(data) != cls.byte_width:
            msg = "expected {} bytes but {} were given"
            raise errors.InvalidBytes(msg.format(cls.byte_width, len(data)))
        # the last byte is the most significant one
        return functools.reduce(Concat, [Constant(b, 8) for b in reversed(data)])

    @classmethod
    def to_le_bytes(cls, x):
        """Convert a word to a little-endian byte string."""
        assert x.width == cls.width
        return bytes(int(x[8 * i + 7:8 * i]) for i in range(cls.byte_width))


class Word16(Word):
    byte_width = 2
    width = 8 * byte_width
    P = Constant(0xB7E1, width)
    Q = Constant(0x9E37, width)


class Word32(Word):
    byte_width = 4
    width = 8 * byte_width
    P = Constant(0xB7E15163, width)
    Q = Constant(0x9E3779B9, width)


class Word64(Word):
    byte_width = 8
    width = 8 * byte_width
    P = Constant(0xB7E151628AED2A6B, width)
    Q = Constant(0x9E3779B97F4A7C15, width)


class Word128(Word):
    byte_width = 16
    width = 8 * byte_width
    P = Constant(0xB7E151628AED2A6ABF7158809CF4F3C7, width)
    Q = Constant(0x9E3779B97F4A7C15F39CC0605CEDC835, width)


_WORDS = {
    WordSize.word_16: Word16,
    WordSize.word_32: Word32,
    WordSize.word_64: Word64,
    WordSize.word_128: Word128,
}


def get_Word_instance(word_size):
    """Return the `Word` class of the given size.

    The size can be given as a `WordSize` or as its bit-width.

        >>> from rc5py.primitives.word import get_Word_instance, WordSize
        >>> get_Word_instance(WordSize.word_64).width
        64
        >>> get_Word_instance(16).P
        0xb7e1

    """
    return _WORDS[WordSize(word_size)]
