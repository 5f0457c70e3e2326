"""Evaluate the word operations of RC5 on bit-vector constants.

Every operation is a class used as a function: ``BvAdd(x, y)`` checks
its operands and returns a new `Constant`. The classes are never
instantiated.
"""
from sympy.core import cache

from rc5py.bitvector import context
from rc5py.bitvector import core


def _cacheit(func):
    """Memoize *func* while the `Cache` context is enabled."""
    cached_func = cache.cacheit(func)

    def wrapper(*args, **kwargs):
        if context.Cache.current_context:
            return cached_func(*args, **kwargs)
        return func(*args, **kwargs)

    return wrapper


class Operation(object):
    """Base class of the bit-vector operations.

    An operation takes ``arity[0]`` `Constant` operands followed by
    ``arity[1]`` integer operands (a rotation offset, a bit position)
    and returns a `Constant` of width ``output_width(*operands)``.

    While the `Validation` context is enabled, the operands are checked
    against ``operand_types`` and ``condition`` before evaluation.
    Operations whose operands are all words of the same width set
    ``is_simple``; they also accept plain integers, which are converted
    to constants of the width of the other operand::

        >>> from rc5py.bitvector.core import Constant
        >>> (Constant(1, 8) + 1).vrepr()
        'Constant(0b00000010, width=8)'

    """

    arity = None
    is_simple = False

    @_cacheit
    def __new__(cls, *args, **options):
        validate = options.pop("validate_operands", context.Validation.current_context)
        if validate:
            args = cls._parse_args(*args)

        result = cls.eval(*args)
        assert isinstance(result, core.Constant)
        assert result.width == cls.output_width(*args)
        return result

    @classmethod
    def _parse_args(cls, *args):
        if cls.is_simple:
            widths = [a.width for a in args if isinstance(a, core.Term)]
            if not widths:
                raise TypeError("{} expects at least 1 term operand".format(cls.__name__))
            args = [core.Constant(a, widths[0]) if isinstance(a, int) else a for a in args]

        operand_types = getattr(cls, "operand_types", [core.Constant] * len(args))
        for expected, arg in zip(operand_types, args):
            if not isinstance(arg, expected):
                msg = "{} expects {} operands but got {}"
                raise TypeError(msg.format(cls.__name__, expected.__name__, type(arg).__name__))

        num_terms = sum(1 for a in args if isinstance(a, core.Term))
        assert (num_terms, len(args) - num_terms) == tuple(cls.arity)
        assert cls.condition(*args), "{}.condition({}) did not hold".format(cls.__name__, args)

        return args

    @classmethod
    def condition(cls, *args):
        """Return True if the operands are valid."""
        return True

    @classmethod
    def output_width(cls, *args):
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def eval(cls, *args):
        """Compute the result from already checked operands."""
        raise NotImplementedError("subclasses need to override this method")


class _SameWidthOperation(Operation):
    """Operation on two words of the same width."""

    arity = [2, 0]
    is_simple = True

    @classmethod
    def condition(cls, x, y):
        return x.width == y.width

    @classmethod
    def output_width(cls, x, y):
        return x.width


class _RotationOperation(Operation):
    """Rotation of a word by an offset in ``[0, width)``."""

    arity = [1, 1]
    operand_types = [core.Constant, int]

    @classmethod
    def condition(cls, x, r):
        return x.width > r >= 0

    @classmethod
    def output_width(cls, x, r):
        return x.width


class BvXor(_SameWidthOperation):
    """Bitwise exclusive-or, also available as the ``^`` operator.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import BvXor
        >>> BvXor(Constant(5, 8), 3)
        0x06
        >>> Constant(5, 8) ^ Constant(3, 8)
        0x06

    """

    @classmethod
    def eval(cls, x, y):
        return core.Constant(int(x) ^ int(y), x.width)


class BvAdd(_SameWidthOperation):
    """Addition modulo ``2**width``, also available as the ``+`` operator.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import BvAdd
        >>> BvAdd(Constant(0xff, 8), 2)
        0x01
        >>> Constant(1, 8) + 2
        0x03

    """

    @classmethod
    def eval(cls, x, y):
        return core.Constant((int(x) + int(y)) % 2 ** x.width, x.width)


class BvSub(_SameWidthOperation):
    """Subtraction modulo ``2**width``, also available as the ``-`` operator.

        >>> from rc5py.bitvector.core import Constant
        >>> Constant(1, 8) - 2
        0xff

    """

    @classmethod
    def eval(cls, x, y):
        return core.Constant((int(x) - int(y)) % 2 ** x.width, x.width)


class RotateLeft(_RotationOperation):
    """Rotate the bits of a word towards the most significant end.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import RotateLeft
        >>> RotateLeft(Constant(0x96, 8), 2)
        0x5a

    """

    @classmethod
    def eval(cls, x, r):
        width = x.width
        r %= width
        mask = 2 ** width - 1
        return core.Constant(((int(x) << r) & mask) | (int(x) >> (width - r)), width)


class RotateRight(_RotationOperation):
    """Rotate the bits of a word towards the least significant end.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import RotateRight
        >>> RotateRight(Constant(0x96, 8), 3)
        0xd2

    """

    @classmethod
    def eval(cls, x, r):
        width = x.width
        r %= width
        mask = 2 ** width - 1
        return core.Constant((int(x) >> r) | ((int(x) << (width - r)) & mask), width)


class Extract(Operation):
    """Return the bits of ``t`` from position ``i`` down to ``j``.

    Both ends are included and position 0 is the least significant
    bit, so ``Extract(t, i, j)`` is also written ``t[i:j]``. Words are
    split into bytes this way.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import Extract
        >>> Extract(Constant(0b11100, 5), 4, 2)
        0b111
        >>> Constant(0x1234, 16)[15:8]
        0x12

    """

    arity = [1, 2]
    operand_types = [core.Constant, int, int]

    @classmethod
    def condition(cls, t, i, j):
        return t.width > i >= j >= 0

    @classmethod
    def output_width(cls, t, i, j):
        return i - j + 1

    @classmethod
    def eval(cls, t, i, j):
        width = cls.output_width(t, i, j)
        return core.Constant((int(t) >> j) % 2 ** width, width)


class Concat(Operation):
    """Join two constants, the first one holding the most significant bits.

    Words are assembled from bytes this way.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import Concat
        >>> Concat(Constant(0x12, 8), Constant(0x345, 12))
        0x12345

    """

    arity = [2, 0]

    @classmethod
    def output_width(cls, x, y):
        return x.width + y.width

    @classmethod
    def eval(cls, x, y):
        return core.Constant((int(x) << y.width) | int(y), cls.output_width(x, y))


class ZeroExtend(Operation):
    """Prepend ``i`` zero bits, keeping the unsigned value.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.operation import ZeroExtend
        >>> ZeroExtend(Constant(0x12, 8), 4)
        0x012

    """

    arity = [1, 1]
    operand_types = [core.Constant, int]

    @classmethod
    def condition(cls, x, i):
        return i >= 0

    @classmethod
    def output_width(cls, x, i):
        return x.width + i

    @classmethod
    def eval(cls, x, i):
        return core.Constant(int(x), x.width + i)
