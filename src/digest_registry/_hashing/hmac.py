# Copyright 2024 The Sigstore Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""HMAC (RFC 2104) over an arbitrary one-shot hash function.

Only the primitives that no library can key go through here. The standard
library `hmac` module widens any block size below 16 bytes to 64 bytes, and
CRC and FNV have a block size of a single byte. SHAKE128 and SHAKE256 have no
`hashlib` object with a fixed `digest()`, and `cryptography` offers no HMAC
over an extendable-output function. Those primitives are keyed here, from the
one-shot `HashFunc` and the block size (or sponge rate) of the primitive.

Keys longer than the block are hashed first. The resulting key is then cut
to the block size and zero padded. For every primitive whose digest fits in
its block this is exactly RFC 2104. For block-size-1 checksums only the first
byte of the hashed key takes part in the pads.
"""

from digest_registry._hashing import hashing


_TRANS_5C = bytes(x ^ 0x5C for x in range(256))
_TRANS_36 = bytes(x ^ 0x36 for x in range(256))


def digest(
    hash_func: hashing.HashFunc,
    block_size: int,
    message: bytes | None = None,
    key: bytes | None = None,
) -> bytes:
    """Computes `HMAC(key, message)` with `hash_func` as the primitive.

    Args:
        hash_func: The one-shot hash function to key.
        block_size: The block size, in bytes, of the primitive.
        message: The message to authenticate. `None` is the empty message.
        key: The secret key. `None` is the empty key.

    Returns:
        The MAC, with the same length as the output of `hash_func`.
    """
    message = message or b""
    key = key or b""
    if len(key) > block_size:
        key = hash_func(key)
    key = key[:block_size].ljust(block_size, b"\x00")

    inner = hash_func(key.translate(_TRANS_36) + message)
    return hash_func(key.translate(_TRANS_5C) + inner)
