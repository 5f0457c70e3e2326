"""Encrypt and decrypt byte strings with RC5.

Use a `Context` to encrypt or decrypt several buffers with the same key;
otherwise the one-shot functions `encrypt` and `decrypt` can be used.
Padding and modes of operation are not provided: buffers are processed
block by block (ECB) and their length must be a multiple of the block size.

    >>> from rc5py.cipher import encrypt, decrypt
    >>> key = bytes.fromhex("2bd6459f82c5b300952c49104881ff48")
    >>> encrypt(key, bytes.fromhex("ea024714ad5c4d84"), 12).hex()
    '11e43b86d231ea64'
    >>> decrypt(key, bytes.fromhex("11e43b86d231ea64"), 12).hex()
    'ea024714ad5c4d84'

"""
import logging
import weakref

from rc5py import errors
from rc5py import secret
from rc5py.bitvector import context
from rc5py.primitives import rc5
from rc5py.primitives.word import WordSize

log = logging.getLogger(__name__)

DEFAULT_WORD_SIZE = WordSize.word_32
DEFAULT_ROUNDS = 12
DEFAULT_KEY_SIZE = 16


class Context(object):
    """Hold the expanded key of RC5-w/r.

    The context takes ownership of the key: a ``bytearray`` (or writable
    ``memoryview``) key is wiped as soon as it has been expanded, whether
    the expansion succeeds or not. The round keys are kept as a
    `Secret` until the context is closed, either explicitly with
    `close`, at the end of a ``with`` block, or when the context is
    garbage collected.

    A context is never modified by `encrypt` or `decrypt`, so it can be
    shared between threads.

        >>> from rc5py.cipher import Context
        >>> key = bytearray(range(16))
        >>> with Context(key, 12) as ctx:
        ...     ctx.decrypt(bytes.fromhex("0011223344556677")).hex()
        '96950dda654a3d62'
        >>> key == bytearray(16)
        True
        >>> ctx
        Context(word_size=32, rounds=12, closed=True)

    Args:
        key: the secret key, at most 256 bytes.
        rounds: the number of rounds, between 0 and 256.
        word_size: the `WordSize` (or bit-width) of the words.

    """

    def __init__(self, key, rounds, word_size=DEFAULT_WORD_SIZE):
        buffer = None
        try:
            buffer = secret.take_buffer(key)
            self.word_size = WordSize(word_size)
            self.rounds = rounds
            with context.Cache(False), context.Validation(False):
                round_keys = rc5.expand_key(buffer, rounds, self.word_size)
        finally:
            if buffer is not None:
                secret.zeroize(buffer)

        self._cipher = rc5.get_RC5_instance(self.word_size, rounds)
        word = self._cipher.word
        self._expanded_key = secret.Secret(
            bytearray(b"".join(word.to_le_bytes(k) for k in round_keys)))
        self._finalizer = weakref.finalize(self, self._expanded_key.zeroize)

        log.debug("created %s context", self._cipher.__name__)

    def __repr__(self):
        return "{}(word_size={}, rounds={}, closed={})".format(
            type(self).__name__, self.word_size.value, self.rounds, self.closed)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def block_size(self):
        """The number of bytes of a block."""
        return 2 * self._cipher.word.byte_width

    @property
    def closed(self):
        """True if the round keys have been wiped."""
        return not self._finalizer.alive

    def close(self):
        """Wipe the round keys. The context cannot be used afterwards."""
        if self._finalizer.alive:
            self._finalizer()
            log.debug("closed %s context", self._cipher.__name__)

    def encrypt(self, plaintext):
        """Return the ciphertext of a plaintext whose length is a multiple
        of the block size."""
        return self._process(plaintext, self._cipher.encryption)

    def decrypt(self, ciphertext):
        """Return the plaintext of a ciphertext whose length is a multiple
        of the block size."""
        return self._process(ciphertext, self._cipher.decryption)

    def _process(self, data, function):
        if self.closed:
            raise ValueError("operation on a closed context")

        data = memoryview(data)
        if not data.c_contiguous:
            data = memoryview(data.tobytes())
        data = data.cast("B")

        block_size = self.block_size
        if len(data) % block_size != 0:
            msg = "the input length must be a multiple of {} bytes but it is {}"
            raise errors.InvalidInputLength(msg.format(block_size, len(data)))

        word = self._cipher.word
        word_bytes = word.byte_width
        output = bytearray()

        with context.Cache(False), context.Validation(False):
            with self._expanded_key.expose_secret() as expanded_key:
                round_keys = [word.from_le_bytes(expanded_key[i:i + word_bytes])
                              for i in range(0, len(expanded_key), word_bytes)]

            for offset in range(0, len(data), block_size):
                block = data[offset:offset + block_size]
                a, b = function(
                    word.from_le_bytes(block[:word_bytes]),
                    word.from_le_bytes(block[word_bytes:]),
                    round_keys=round_keys)
                output += word.to_le_bytes(a)
                output += word.to_le_bytes(b)

        return bytes(output)


def new_context(key, rounds, word_size=DEFAULT_WORD_SIZE):
    """Return a `Context` for the given key, rounds and word size."""
    return Context(key, rounds, word_size)


def encrypt(key, plaintext, rounds, word_size=DEFAULT_WORD_SIZE):
    """Return the ciphertext of *plaintext* with RC5-w/r/b.

    The word size w is given by *word_size* and the key size b
    by the length of *key*. The caller's key is left unchanged;
    the expanded key is wiped before returning.
    """
    with Context(bytearray(memoryview(key)), rounds, word_size) as ctx:
        return ctx.encrypt(plaintext)


def decrypt(key, ciphertext, rounds, word_size=DEFAULT_WORD_SIZE):
    """Return the plaintext of *ciphertext* with RC5-w/r/b.

    See `encrypt` for more information.
    """
    with Context(bytearray(memoryview(key)), rounds, word_size) as ctx:
        return ctx.decrypt(ciphertext)


def _check_default_key(key):
    key_size = memoryview(key).nbytes
    if key_size != DEFAULT_KEY_SIZE:
        msg = "RC5-32/12/16 requires a {}-byte key but {} bytes were given"
        raise errors.InvalidKeySize(msg.format(DEFAULT_KEY_SIZE, key_size))


def encrypt_default(key, plaintext):
    """Return the ciphertext of *plaintext* with RC5-32/12/16.

        >>> from rc5py.cipher import encrypt_default
        >>> encrypt_default(bytes(range(16)), bytes.fromhex("96950dda654a3d62")).hex()
        '0011223344556677'

    """
    _check_default_key(key)
    return encrypt(key, plaintext, DEFAULT_ROUNDS, DEFAULT_WORD_SIZE)


def decrypt_default(key, ciphertext):
    """Return the plaintext of *ciphertext* with RC5-32/12/16."""
    _check_default_key(key)
    return decrypt(key, ciphertext, DEFAULT_ROUNDS, DEFAULT_WORD_SIZE)
