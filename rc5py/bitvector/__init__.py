"""Fixed-width words and the operations RC5 applies to them.

`core` defines the `Constant` words, `operation` the XOR, modular
addition and subtraction, rotations, extraction and concatenation,
and `context` switches the memoization and operand checks of those
operations on and off.
"""
