"""RC5 block cipher with variable word size, key size and number of rounds.

The cipher is implemented over fixed-width bit-vectors (see `bitvector`)
as a key schedule, an encryption and a decryption function (see
`primitives`). The `cipher` module encrypts and decrypts byte strings.
"""
from rc5py.cipher import (
    Context, new_context, encrypt, decrypt, encrypt_default, decrypt_default
)
from rc5py.errors import (
    RC5Error, InvalidKeySize, InvalidRoundsCount, InvalidWordSize,
    InvalidBytes, InvalidInputLength
)
from rc5py.primitives.word import WordSize
