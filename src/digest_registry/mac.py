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

"""Registry of one-shot HMAC functions.

Every function in this module has the shape of `MACFunc`: it takes the
message and the key (`None` for either is the same as `b""`) and returns
`HMAC(key, message)` over the named primitive. The MAC is always as long as
the digest of the primitive, `HASH_SIZE[alg]`. None of these functions
raise.

```python
>>> m = mac.from_hash_alg(schema.HashAlg.SHA256)
>>> m(b"abc", b"test").hex()
'd796579aed123e7b743ccaf5b150affa1223e31ecba8b88c9da9ccf7ad5e0594'
```

The FNV and CRC variants exist for compatibility only. Their primitives have
a one byte block, so only a single byte of key material enters the pads and
the result offers no authentication whatsoever. `NON_CRYPTOGRAPHIC` lists
them so that callers can refuse them.

BLAKE2 MACs are HMAC over unkeyed BLAKE2, not the native keyed mode of BLAKE2.
"""

from collections.abc import Callable, Mapping
import enum
import functools
import hashlib
import hmac
import logging
import types
from typing import Any

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from digest_registry import hash as hash_lib
from digest_registry import schema
from digest_registry._hashing import hashing
from digest_registry._hashing import hmac as hmac_lib


logger = logging.getLogger(__name__)


MACFunc = hashing.MACFunc


class Algorithm(enum.Enum):
    """HMAC algorithm. New members must only be appended."""

    UNKNOWN = 0
    SHA1 = 1
    SHA224 = 2
    SHA256 = 3
    SHA384 = 4
    SHA512 = 5
    SHA512_224 = 6
    SHA512_256 = 7
    SHA3_224 = 8
    SHA3_256 = 9
    SHA3_384 = 10
    SHA3_512 = 11
    SHAKE128 = 12
    SHAKE256 = 13
    MD5 = 14
    FNV1_32 = 15
    FNV1A_32 = 16
    FNV1_64 = 17
    FNV1A_64 = 18
    FNV1_128 = 19
    FNV1A_128 = 20
    CRC32 = 21
    CRC64ISO = 22
    CRC64ECMA = 23
    BLAKE2S_256 = 24
    BLAKE2B_256 = 25
    BLAKE2B_384 = 26
    BLAKE2B_512 = 27


NON_CRYPTOGRAPHIC: frozenset[Algorithm] = frozenset(
    {
        Algorithm.FNV1_32,
        Algorithm.FNV1A_32,
        Algorithm.FNV1_64,
        Algorithm.FNV1A_64,
        Algorithm.FNV1_128,
        Algorithm.FNV1A_128,
        Algorithm.CRC32,
        Algorithm.CRC64ISO,
        Algorithm.CRC64ECMA,
    }
)


HASH_SIZE: Mapping[schema.HashAlg, int] = hashing.HASH_SIZE

SIZE_SHA1 = HASH_SIZE[schema.HashAlg.SHA1]
SIZE_SHA224 = HASH_SIZE[schema.HashAlg.SHA224]
SIZE_SHA256 = HASH_SIZE[schema.HashAlg.SHA256]
SIZE_SHA384 = HASH_SIZE[schema.HashAlg.SHA384]
SIZE_SHA512 = HASH_SIZE[schema.HashAlg.SHA512]
SIZE_SHA512_224 = HASH_SIZE[schema.HashAlg.SHA512_224]
SIZE_SHA512_256 = HASH_SIZE[schema.HashAlg.SHA512_256]
SIZE_SHA3_224 = HASH_SIZE[schema.HashAlg.SHA3_224]
SIZE_SHA3_256 = HASH_SIZE[schema.HashAlg.SHA3_256]
SIZE_SHA3_384 = HASH_SIZE[schema.HashAlg.SHA3_384]
SIZE_SHA3_512 = HASH_SIZE[schema.HashAlg.SHA3_512]
SIZE_SHAKE128 = HASH_SIZE[schema.HashAlg.SHAKE128]
SIZE_SHAKE256 = HASH_SIZE[schema.HashAlg.SHAKE256]
SIZE_MD5 = HASH_SIZE[schema.HashAlg.MD5]
SIZE_FNV1_32 = HASH_SIZE[schema.HashAlg.FNV1_32]
SIZE_FNV1A_32 = HASH_SIZE[schema.HashAlg.FNV1A_32]
SIZE_FNV1_64 = HASH_SIZE[schema.HashAlg.FNV1_64]
SIZE_FNV1A_64 = HASH_SIZE[schema.HashAlg.FNV1A_64]
SIZE_FNV1_128 = HASH_SIZE[schema.HashAlg.FNV1_128]
SIZE_FNV1A_128 = HASH_SIZE[schema.HashAlg.FNV1A_128]
SIZE_CRC32 = HASH_SIZE[schema.HashAlg.CRC32]
SIZE_CRC64ISO = HASH_SIZE[schema.HashAlg.CRC64ISO]
SIZE_CRC64ECMA = HASH_SIZE[schema.HashAlg.CRC64ECMA]
SIZE_BLAKE2S_256 = HASH_SIZE[schema.HashAlg.BLAKE2S_256]
SIZE_BLAKE2B_256 = HASH_SIZE[schema.HashAlg.BLAKE2B_256]
SIZE_BLAKE2B_384 = HASH_SIZE[schema.HashAlg.BLAKE2B_384]
SIZE_BLAKE2B_512 = HASH_SIZE[schema.HashAlg.BLAKE2B_512]


# Block sizes of the primitives keyed through `hmac_lib`.
_SHAKE128_RATE = 168
_SHAKE256_RATE = 136
_CHECKSUM_BLOCK_SIZE = 1


def _stdlib(
    digestmod: str | Callable[..., Any],
    message: bytes | None,
    key: bytes | None,
) -> bytes:
    return hmac.digest(key or b"", message or b"", digestmod)


def _finalize(
    algorithm: hashes.HashAlgorithm, message: bytes | None, key: bytes | None
) -> bytes:
    # After zero padding, the empty key and a single zero byte are the same key.
    h = crypto_hmac.HMAC(key or b"\x00", algorithm)
    h.update(message or b"")
    return h.finalize()


def sha1(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA1 of `message` under `key` (20 bytes)."""
    return _stdlib("sha1", message, key)


def sha224(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA224 of `message` under `key` (28 bytes)."""
    return _stdlib("sha224", message, key)


def sha256(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA256 of `message` under `key` (32 bytes)."""
    return _stdlib("sha256", message, key)


def sha384(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA384 of `message` under `key` (48 bytes)."""
    return _stdlib("sha384", message, key)


def sha512(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA512 of `message` under `key` (64 bytes)."""
    return _stdlib("sha512", message, key)


def sha512_224(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC-SHA512/224 of `message` under `key` (28 bytes)."""
    return _finalize(hashes.SHA512_224(), message, key)


def sha512_256(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC-SHA512/256 of `message` under `key` (32 bytes)."""
    return _finalize(hashes.SHA512_256(), message, key)


def sha3_224(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA3-224 of `message` under `key` (28 bytes)."""
    return _stdlib("sha3_224", message, key)


def sha3_256(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA3-256 of `message` under `key` (32 bytes)."""
    return _stdlib("sha3_256", message, key)


def sha3_384(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA3-384 of `message` under `key` (48 bytes)."""
    return _stdlib("sha3_384", message, key)


def sha3_512(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-SHA3-512 of `message` under `key` (64 bytes)."""
    return _stdlib("sha3_512", message, key)


def shake128(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over SHAKE128 of `message` under `key` (32 bytes).

    The block size used for the pads is the rate of the sponge (168 bytes)
    and both passes squeeze 32 bytes.
    """
    return hmac_lib.digest(hash_lib.shake128, _SHAKE128_RATE, message, key)


def shake256(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over SHAKE256 of `message` under `key` (64 bytes)."""
    return hmac_lib.digest(hash_lib.shake256, _SHAKE256_RATE, message, key)


def md5(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC-MD5 of `message` under `key` (16 bytes)."""
    return _stdlib("md5", message, key)


def _checksum(
    hash_func: hashing.HashFunc, message: bytes | None, key: bytes | None
) -> bytes:
    return hmac_lib.digest(hash_func, _CHECKSUM_BLOCK_SIZE, message, key)


def fnv1_32(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over FNV-1 32-bit (4 bytes).

    Not a secure MAC: see `NON_CRYPTOGRAPHIC`.
    """
    return _checksum(hash_lib.fnv1_32, message, key)


def fnv1a_32(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over FNV-1a 32-bit (4 bytes). Not a secure MAC."""
    return _checksum(hash_lib.fnv1a_32, message, key)


def fnv1_64(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over FNV-1 64-bit (8 bytes). Not a secure MAC."""
    return _checksum(hash_lib.fnv1_64, message, key)


def fnv1a_64(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over FNV-1a 64-bit (8 bytes). Not a secure MAC."""
    return _checksum(hash_lib.fnv1a_64, message, key)


def fnv1_128(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over FNV-1 128-bit (16 bytes). Not a secure MAC."""
    return _checksum(hash_lib.fnv1_128, message, key)


def fnv1a_128(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over FNV-1a 128-bit (16 bytes). Not a secure MAC."""
    return _checksum(hash_lib.fnv1a_128, message, key)


def crc32(message: bytes | None = None, key: bytes | None = None) -> bytes:
    """Returns HMAC over CRC-32 (4 bytes).

    Not a secure MAC: see `NON_CRYPTOGRAPHIC`.
    """
    return _checksum(hash_lib.crc32, message, key)


def crc64_iso(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over CRC-64 ISO (8 bytes). Not a secure MAC."""
    return _checksum(hash_lib.crc64_iso, message, key)


def crc64_ecma(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over CRC-64 ECMA (8 bytes). Not a secure MAC."""
    return _checksum(hash_lib.crc64_ecma, message, key)


def blake2s_256(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over unkeyed BLAKE2s-256 (32 bytes)."""
    digestmod = functools.partial(hashlib.blake2s, digest_size=SIZE_BLAKE2S_256)
    return _stdlib(digestmod, message, key)


def blake2b_256(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over unkeyed BLAKE2b-256 (32 bytes)."""
    digestmod = functools.partial(hashlib.blake2b, digest_size=SIZE_BLAKE2B_256)
    return _stdlib(digestmod, message, key)


def blake2b_384(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over unkeyed BLAKE2b-384 (48 bytes)."""
    digestmod = functools.partial(hashlib.blake2b, digest_size=SIZE_BLAKE2B_384)
    return _stdlib(digestmod, message, key)


def blake2b_512(
    message: bytes | None = None, key: bytes | None = None
) -> bytes:
    """Returns HMAC over unkeyed BLAKE2b-512 (64 bytes)."""
    return _stdlib(hashlib.blake2b, message, key)


_BY_HASH_ALG: Mapping[schema.HashAlg, MACFunc] = types.MappingProxyType(
    {
        schema.HashAlg.SHA1: sha1,
        schema.HashAlg.SHA224: sha224,
        schema.HashAlg.SHA256: sha256,
        schema.HashAlg.SHA384: sha384,
        schema.HashAlg.SHA512: sha512,
        schema.HashAlg.SHA512_224: sha512_224,
        schema.HashAlg.SHA512_256: sha512_256,
        schema.HashAlg.SHA3_224: sha3_224,
        schema.HashAlg.SHA3_256: sha3_256,
        schema.HashAlg.SHA3_384: sha3_384,
        schema.HashAlg.SHA3_512: sha3_512,
        schema.HashAlg.SHAKE128: shake128,
        schema.HashAlg.SHAKE256: shake256,
        schema.HashAlg.MD5: md5,
        schema.HashAlg.FNV1_32: fnv1_32,
        schema.HashAlg.FNV1A_32: fnv1a_32,
        schema.HashAlg.FNV1_64: fnv1_64,
        schema.HashAlg.FNV1A_64: fnv1a_64,
        schema.HashAlg.FNV1_128: fnv1_128,
        schema.HashAlg.FNV1A_128: fnv1a_128,
        schema.HashAlg.CRC32: crc32,
        schema.HashAlg.CRC64ISO: crc64_iso,
        schema.HashAlg.CRC64ECMA: crc64_ecma,
        schema.HashAlg.BLAKE2S_256: blake2s_256,
        schema.HashAlg.BLAKE2B_256: blake2b_256,
        schema.HashAlg.BLAKE2B_384: blake2b_384,
        schema.HashAlg.BLAKE2B_512: blake2b_512,
    }
)


_BY_ALGORITHM: Mapping[Algorithm, MACFunc] = types.MappingProxyType(
    {
        alg: _BY_HASH_ALG[schema.HashAlg[alg.name]]
        for alg in Algorithm
        if alg is not Algorithm.UNKNOWN
    }
)


def from_algorithm(alg: Algorithm | int) -> MACFunc | None:
    """Returns the MAC function registered for an internal identifier.

    Args:
        alg: The algorithm, as an `Algorithm` member or its integer value.

    Returns:
        The MAC function, or `None` if `alg` does not name a supported
        algorithm.
    """
    resolved = hashing.parse_identifier(Algorithm, alg)
    if resolved is None:
        logger.debug("No MAC function for algorithm %r", alg)
        return None
    return _BY_ALGORITHM.get(resolved)


def from_hash_alg(hash_alg: schema.HashAlg | int) -> MACFunc | None:
    """Returns the MAC function registered for a configuration identifier.

    Args:
        hash_alg: The algorithm, as a `schema.HashAlg` member or its integer
          value.

    Returns:
        The MAC function, or `None` if `hash_alg` does not name a supported
        algorithm.
    """
    resolved = hashing.parse_identifier(schema.HashAlg, hash_alg)
    if resolved is None:
        logger.debug("No MAC function for hash algorithm %r", hash_alg)
        return None
    return _BY_HASH_ALG.get(resolved)
