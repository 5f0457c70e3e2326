"""Hold secret material that can be wiped from memory.

Python objects cannot be wiped in general (``bytes`` and ``int`` are
immutable), so secret material is kept in mutable buffers
(``bytearray`` or writable ``memoryview``) and overwritten with
zeroes when it is no longer needed.
"""


def zeroize(buffer):
    """Overwrite a mutable buffer with zeroes.

        >>> from rc5py.secret import zeroize
        >>> key = bytearray(b"secret")
        >>> zeroize(key)
        >>> key
        bytearray(b'\\x00\\x00\\x00\\x00\\x00\\x00')

    """
    if isinstance(buffer, bytearray):
        buffer[:] = bytes(len(buffer))
        return
    if not isinstance(buffer, memoryview):
        raise TypeError("cannot zeroize '{}' objects".format(type(buffer).__name__))
    if buffer.readonly:
        raise TypeError("cannot zeroize a read-only buffer")

    if buffer.c_contiguous:
        buffer.cast("B")[:] = bytes(buffer.nbytes)
    elif buffer.ndim == 1:
        # strided views are overwritten through a view of the same format
        buffer[:] = memoryview(bytes(buffer.nbytes)).cast(buffer.format)
    else:
        raise TypeError("cannot zeroize a non-contiguous multi-dimensional buffer")


def take_buffer(data):
    """Return a mutable buffer with the given bytes.

    Writable contiguous buffers are returned as a byte view, so that
    zeroizing the result also wipes the caller's copy. Writable strided
    buffers are copied and wiped. Other bytes-like objects are copied
    into a new ``bytearray``. Objects that do not support the buffer
    protocol (e.g. ``int``) raise `TypeError`.

        >>> from rc5py.secret import take_buffer
        >>> take_buffer(b"key")
        bytearray(b'key')
        >>> take_buffer(16)
        Traceback (most recent call last):
         ...
        TypeError: memoryview: a bytes-like object is required, not 'int'

    """
    if isinstance(data, bytearray):
        return data
    view = memoryview(data)
    if view.readonly:
        return bytearray(view)
    if view.c_contiguous:
        return view.cast("B")
    buffer = bytearray(view)
    zeroize(view)
    return buffer


class Secret(object):
    """Wrap a buffer holding secret material.

    The buffer is only accessible through `expose_secret`, which
    returns a read-only view, and it is wiped by `zeroize`. A secret
    can also be used as a context manager that zeroizes it on exit.

        >>> from rc5py.secret import Secret
        >>> secret = Secret(bytearray(b"round keys"))
        >>> secret
        Secret([REDACTED])
        >>> with secret:
        ...     bytes(secret.expose_secret())
        b'round keys'
        >>> secret.zeroized
        True

    """

    __slots__ = ["_buffer"]

    def __init__(self, buffer):
        assert isinstance(buffer, bytearray)
        self._buffer = buffer

    def __repr__(self):
        return "{}([REDACTED])".format(type(self).__name__)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.zeroize()

    def __len__(self):
        if self._buffer is None:
            return 0
        return len(self._buffer)

    @property
    def zeroized(self):
        """True if the secret has been wiped."""
        return self._buffer is None

    def expose_secret(self):
        """Return a read-only view of the secret buffer."""
        if self._buffer is None:
            raise ValueError("the secret has been zeroized")
        return memoryview(self._buffer).toreadonly()

    def zeroize(self):
        """Overwrite the secret buffer with zeroes and release it."""
        if self._buffer is not None:
            zeroize(self._buffer)
            self._buffer = None
