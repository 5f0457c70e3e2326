"""Represent symmetric primitives."""
import collections.abc

from rc5py import errors
from rc5py.bitvector import core


class BvFunction(object):
    """Represent (iterated) fixed-width bit-vector functions.

    A `BvFunction` takes fixed-width `Constant` operands and return a
    tuple of fixed-width `Constant`. An iterated bit-vector function
    contains a subroutine that is iterated a certain number of *rounds*.

    Similar to `Operation`, `BvFunction` is evaluated
    using the operator ``()`` and provides *Automatic Constant Conversion*.
    Keyword arguments are passed to `eval` unchanged.

        >>> from rc5py.primitives.primitives import BvFunction
        >>> class Swap(BvFunction):
        ...     input_widths = [8, 8]
        ...     output_widths = [8, 8]
        ...     @classmethod
        ...     def eval(cls, x, y):
        ...         return y, x
        >>> Swap(1, 2)  # automatic conversion from int to Constant
        (0x02, 0x01)

    Attributes:
        input_widths: a list containing the widths of the inputs
        output_widths: a list containing the widths of the outputs
        rounds: the number of iterations

    """
    input_widths = None
    output_widths = None
    rounds = None

    def __new__(cls, *args, **options):
        input_widths = cls.get_input_widths(len(args))
        if len(input_widths) != len(args):
            raise ValueError("{} requires {} inputs but {} were given".format(
                cls.__name__, len(input_widths), len(args)))
        newargs = []
        for arg, width in zip(args, input_widths):
            newargs.append(core.bitvectify(arg, width))
        args = newargs

        result = cls.eval(*args, **options)

        assert isinstance(result, collections.abc.Sequence)
        assert len(cls.output_widths) == len(result)

        output = []
        for r, width in zip(result, cls.output_widths):
            output.append(core.bitvectify(r, width))

        return tuple(output)

    @classmethod
    def get_input_widths(cls, num_inputs):
        """Return the widths of the inputs given their number."""
        return cls.input_widths

    @classmethod
    def eval(cls, *args, **options):
        """Evaluate the function (internal method)."""
        raise NotImplementedError("subclasses need to override this method")


# noinspection PyAbstractClass
class KeySchedule(BvFunction):
    """Represent key schedule functions.

    A key schedule function is a `BvFunction` that takes
    the master key as input and returns the round keys.
    The master key is given byte by byte and it can have
    any length up to ``max_key_size`` bytes.
    See `BvFunction` for more information.

    Attributes:
        max_key_size: the maximum number of bytes of the master key

    """
    max_key_size = None

    @classmethod
    def get_input_widths(cls, num_inputs):
        if num_inputs > cls.max_key_size:
            msg = "{} accepts at most {} key bytes but {} were given"
            raise errors.InvalidKeySize(msg.format(cls.__name__, cls.max_key_size, num_inputs))
        return [8 for _ in range(num_inputs)]


# noinspection PyAbstractClass
class Encryption(BvFunction):
    """Represent encryption functions.

    An encryption function is a `BvFunction` that takes
    the plaintext and the keyword argument ``round_keys``
    and returns the ciphertext.
    See `BvFunction` for more information.
    """


# noinspection PyAbstractClass
class Decryption(BvFunction):
    """Represent decryption functions.

    A decryption function is the inverse of an `Encryption` function
    for the same ``round_keys``.
    See `BvFunction` for more information.
    """


class Cipher(object):
    """Represent (iterated) block ciphers.

    A (iterated) block cipher consists of `KeySchedule` function
    that computes round keys from a master key, an `Encryption`
    function that computes a ciphertext from a given plaintext
    and the round keys, and the inverse `Decryption` function.

    Given a ``cipher``, it can be evaluated with the operator ``()``
    by passing it as arguments the plaintext and the master key,
    that is, ``cipher(plaintext, masterkey)`` returns the ciphertext.
    The round keys are passed explicitly to the encryption function,
    so a cipher class holds no state and can be shared between threads.

        >>> from rc5py.primitives.primitives import Cipher
        >>> from rc5py.primitives import rc5
        >>> RC5_32_12 = rc5.get_RC5_instance(rc5.WordSize.word_32, 12)
        >>> issubclass(RC5_32_12, Cipher)
        True
        >>> RC5_32_12([0, 0], bytes(16))
        (0xeedba521, 0x6d8f4b15)

    Attributes:
        key_schedule: the `KeySchedule` function of the cipher
        encryption: the `Encryption` function of the cipher
        decryption: the `Decryption` function of the cipher
        rounds: the number of rounds

    """
    key_schedule = None
    encryption = None
    decryption = None
    rounds = None

    def __new__(cls, plaintext, masterkey):
        assert isinstance(plaintext, collections.abc.Sequence)
        assert isinstance(masterkey, collections.abc.Sequence)

        round_keys = cls.key_schedule(*masterkey)
        return cls.encryption(*plaintext, round_keys=round_keys)

    @classmethod
    def decrypt(cls, ciphertext, masterkey):
        """Return the plaintext of the given ciphertext."""
        assert isinstance(ciphertext, collections.abc.Sequence)
        assert isinstance(masterkey, collections.abc.Sequence)

        round_keys = cls.key_schedule(*masterkey)
        return cls.decryption(*ciphertext, round_keys=round_keys)

    @classmethod
    def test(cls):
        """Check the cipher against its test vectors."""
        raise NotImplementedError("subclasses need to override this method")
