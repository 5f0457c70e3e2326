"""Provide context managers to modify the default behaviour."""
import abc
import contextlib
import threading


class _StatefulContextMeta(abc.ABCMeta):
    """Keep the current context of each class per thread."""

    def __init__(cls, *args, **kwargs):
        super().__init__(*args, **kwargs)
        cls._local = threading.local()

    @property
    def current_context(cls):
        return getattr(cls._local, "current_context", cls.default_context)

    @current_context.setter
    def current_context(cls, new_context):
        cls._local.current_context = new_context


class StatefulContext(contextlib.AbstractContextManager, metaclass=_StatefulContextMeta):
    """Base class for context managers with history.

    The current context is local to each thread; threads that
    have not entered a context see ``default_context``.
    """

    default_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class Cache(StatefulContext):
    """Control the Cache context.

    Control whether or not the results of bit-vector operations are
    memoized. By default, the cache is enabled.

    Computations involving secret values (e.g. key expansion) should
    disable the cache, so that no intermediate value outlives them.

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.context import Cache
        >>> with Cache(False):
        ...     Constant(1, 8) + Constant(1, 8)
        0x02

    """

    default_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not arguments of bit-vector operators are validated.
    By default, validation of arguments is enabled.

    Note that when it is disabled,  Automatic Constant Conversion is no longer
    available (see `Operation`).

        >>> from rc5py.bitvector.core import Constant
        >>> from rc5py.bitvector.context import Validation
        >>> from rc5py.bitvector.operation import BvAdd
        >>> BvAdd(2, Constant(1, 8))
        0x03
        >>> with Validation(False):
        ...     BvAdd(2, Constant(1, 5))
        Traceback (most recent call last):
         ...
        AttributeError: 'int' object has no attribute 'width'

    Note:
        Disabling `Cache` and `Validation` speeds up computations
        with many bit-vector constants.
    """

    default_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)
