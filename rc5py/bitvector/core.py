"""Fixed-width bit-vector constants used as RC5 words."""
from sympy import Basic, Atom


class Term(Basic):
    """Base class of the values with a fixed bit-width.

    The operators ``^``, ``+``, ``-`` and ``[]`` evaluate the operations
    of `operation` (XOR, modular addition and subtraction, bit
    extraction). Terms are SymPy objects so that these operations can
    be memoized with SymPy's cache.
    """

    __slots__ = ["_width"]

    def __new__(cls, *args, width):
        assert isinstance(width, int) and width > 0
        obj = Basic.__new__(cls, *args)
        obj._width = width
        return obj

    @property
    def width(self):
        """The number of bits."""
        return self._width

    def _hashable_content(self):
        return self.args + (self.width, )

    def __xor__(self, other):
        from rc5py.bitvector import operation
        return operation.BvXor(self, other)

    __rxor__ = __xor__

    def __add__(self, other):
        from rc5py.bitvector import operation
        return operation.BvAdd(self, other)

    __radd__ = __add__

    def __sub__(self, other):
        from rc5py.bitvector import operation
        return operation.BvSub(self, other)

    def __rsub__(self, other):
        from rc5py.bitvector import operation
        return operation.BvSub(other, self)

    def __getitem__(self, key):
        """Extract a bit ``t[i]`` or the bits ``t[i:j]`` (``i >= j``, both included)."""
        from rc5py.bitvector import operation

        if isinstance(key, int):
            if not 0 <= key < self.width:
                raise IndexError("index out of range")
            return operation.Extract(self, key, key)
        if not isinstance(key, slice):
            raise TypeError("invalid index")

        assert key.step in (None, 1)
        i = self.width - 1 if key.start is None else key.start
        j = 0 if key.stop is None else key.stop
        if not 0 <= i < self.width:
            raise IndexError("first index out of range")
        if not 0 <= j <= i:
            raise IndexError("second index out of range")
        return operation.Extract(self, i, j)

    def __iter__(self):
        # __getitem__ would otherwise make terms iterable
        raise AttributeError("Term is not iterable")


class Constant(Atom, Term):
    """An unsigned integer ``val`` stored in ``width`` bits.

    Constants are printed in hexadecimal when the width is a multiple
    of 4 and in binary otherwise. A constant compares equal to another
    constant of the same width and value, and to the integer ``val``.

        >>> from rc5py.bitvector.core import Constant
        >>> Constant(0xb7e1, 16)
        0xb7e1
        >>> Constant(5, 3)
        0b101
        >>> Constant(3, 12).vrepr()
        'Constant(0b000000000011, width=12)'
        >>> Constant(3, 12) == 3
        True

    """

    __slots__ = ["_val"]

    def __new__(cls, val, width):
        assert isinstance(val, int) and 0 <= val < 2 ** width
        obj = Term.__new__(cls, width=width)
        obj._val = val
        return obj

    @property
    def val(self):
        return self._val

    def __int__(self):
        return self.val

    def __eq__(self, other):
        if isinstance(other, Constant):
            return self.width == other.width and self.val == other.val
        if isinstance(other, int):
            return self.val == other
        return False

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return super().__hash__()

    def _hashable_content(self):
        return self.val, self.width

    def __str__(self):
        return self.hex() if self.width % 4 == 0 else self.bin()

    __repr__ = __str__

    def vrepr(self):
        """Return the class name, the bits and the width."""
        return "{}({}, width={})".format(type(self).__name__, self.bin(), self.width)

    def bin(self):
        """Return the bits with a ``0b`` prefix, padded to the width.

            >>> from rc5py.bitvector.core import Constant
            >>> Constant(4, 6).bin()
            '0b000100'

        """
        return "0b" + format(self.val, "0{}b".format(self.width))

    def hex(self):
        """Return the nibbles with a ``0x`` prefix, padded to the width.

            >>> from rc5py.bitvector.core import Constant
            >>> Constant(3, 8).hex()
            '0x03'

        """
        assert self.width % 4 == 0
        return "0x" + format(self.val, "0{}x".format(self.width // 4))


def bitvectify(t, width):
    """Return *t* as a term of the given width, converting integers to `Constant`.

        >>> from rc5py.bitvector.core import bitvectify
        >>> bitvectify(0, 8).vrepr()
        'Constant(0b00000000, width=8)'

    """
    if isinstance(t, int):
        return Constant(t, width)
    if isinstance(t, Term):
        assert t.width == width
        return t
    raise TypeError("cannot convert '{}' to a bit-vector".format(type(t).__name__))
