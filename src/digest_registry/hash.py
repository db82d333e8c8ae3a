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

"""Registry of one-shot hash functions.

Every function in this module has the shape of `HashFunc`: it takes the data
to hash (`None` is the same as `b""`) and returns the digest as `bytes`. The
length of the digest is always `HASH_SIZE[alg]`. None of these functions
raise.

Hash functions can be used directly:

```python
>>> hash.sha256(b"abc").hex()
'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
```

or selected at runtime, either from the internal `Algorithm` enumeration or
from the `schema.HashAlg` identifier found in configuration:

```python
>>> h = hash.from_hash_alg(schema.HashAlg.SHA256)
>>> h(b"abc") == hash.sha256(b"abc")
True
>>> hash.from_hash_alg(schema.HashAlg.UNKNOWN) is None
True
```

The set of algorithms is closed. Lookups of anything that is not a known
algorithm return `None`.

SHAKE128 and SHAKE256 are extendable-output functions. This registry fixes
their output to 32 and 64 bytes respectively. FNV and CRC are checksums,
not cryptographic hashes.
"""

from collections.abc import Mapping
import enum
import hashlib
import logging
import types

from cryptography.hazmat.primitives import hashes

from digest_registry import schema
from digest_registry._hashing import checksum
from digest_registry._hashing import hashing


logger = logging.getLogger(__name__)


HashFunc = hashing.HashFunc


class Algorithm(enum.Enum):
    """Hash algorithm. New members must only be appended."""

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


def _finalize(algorithm: hashes.HashAlgorithm, data: bytes | None) -> bytes:
    h = hashes.Hash(algorithm)
    h.update(data or b"")
    return h.finalize()


def sha1(data: bytes | None = None) -> bytes:
    """Returns the SHA1 digest of `data` (20 bytes)."""
    return hashlib.sha1(data or b"").digest()


def sha224(data: bytes | None = None) -> bytes:
    """Returns the SHA224 digest of `data` (28 bytes)."""
    return hashlib.sha224(data or b"").digest()


def sha256(data: bytes | None = None) -> bytes:
    """Returns the SHA256 digest of `data` (32 bytes)."""
    return hashlib.sha256(data or b"").digest()


def sha384(data: bytes | None = None) -> bytes:
    """Returns the SHA384 digest of `data` (48 bytes)."""
    return hashlib.sha384(data or b"").digest()


def sha512(data: bytes | None = None) -> bytes:
    """Returns the SHA512 digest of `data` (64 bytes)."""
    return hashlib.sha512(data or b"").digest()


def sha512_224(data: bytes | None = None) -> bytes:
    """Returns the SHA512/224 digest of `data` (28 bytes).

    `hashlib` only provides the truncated SHA-512 variants when the linked
    OpenSSL does, so these two go through `cryptography`.
    """
    return _finalize(hashes.SHA512_224(), data)


def sha512_256(data: bytes | None = None) -> bytes:
    """Returns the SHA512/256 digest of `data` (32 bytes)."""
    return _finalize(hashes.SHA512_256(), data)


def sha3_224(data: bytes | None = None) -> bytes:
    """Returns the SHA3-224 digest of `data` (28 bytes)."""
    return hashlib.sha3_224(data or b"").digest()


def sha3_256(data: bytes | None = None) -> bytes:
    """Returns the SHA3-256 digest of `data` (32 bytes)."""
    return hashlib.sha3_256(data or b"").digest()


def sha3_384(data: bytes | None = None) -> bytes:
    """Returns the SHA3-384 digest of `data` (48 bytes)."""
    return hashlib.sha3_384(data or b"").digest()


def sha3_512(data: bytes | None = None) -> bytes:
    """Returns the SHA3-512 digest of `data` (64 bytes)."""
    return hashlib.sha3_512(data or b"").digest()


def shake128(data: bytes | None = None) -> bytes:
    """Returns the first 32 bytes of the SHAKE128 output for `data`.

    The extendable-output function absorbs all of `data` and is squeezed for
    exactly `SIZE_SHAKE128` bytes. The same prefix is produced by any SHAKE128
    implementation asked for at least 32 bytes.
    """
    return _finalize(hashes.SHAKE128(digest_size=SIZE_SHAKE128), data)


def shake256(data: bytes | None = None) -> bytes:
    """Returns the first 64 bytes of the SHAKE256 output for `data`."""
    return _finalize(hashes.SHAKE256(digest_size=SIZE_SHAKE256), data)


def md5(data: bytes | None = None) -> bytes:
    """Returns the MD5 digest of `data` (16 bytes)."""
    return hashlib.md5(data or b"").digest()


def fnv1_32(data: bytes | None = None) -> bytes:
    """Returns the FNV-1 32-bit hash of `data`, big-endian (4 bytes).

    FNV is not a cryptographic hash.
    """
    h = checksum.fnv1(data or b"", checksum.FNV_32)
    return h.to_bytes(SIZE_FNV1_32, "big")


def fnv1a_32(data: bytes | None = None) -> bytes:
    """Returns the FNV-1a 32-bit hash of `data`, big-endian (4 bytes)."""
    h = checksum.fnv1a(data or b"", checksum.FNV_32)
    return h.to_bytes(SIZE_FNV1A_32, "big")


def fnv1_64(data: bytes | None = None) -> bytes:
    """Returns the FNV-1 64-bit hash of `data`, big-endian (8 bytes)."""
    h = checksum.fnv1(data or b"", checksum.FNV_64)
    return h.to_bytes(SIZE_FNV1_64, "big")


def fnv1a_64(data: bytes | None = None) -> bytes:
    """Returns the FNV-1a 64-bit hash of `data`, big-endian (8 bytes)."""
    h = checksum.fnv1a(data or b"", checksum.FNV_64)
    return h.to_bytes(SIZE_FNV1A_64, "big")


def fnv1_128(data: bytes | None = None) -> bytes:
    """Returns the FNV-1 128-bit hash of `data`, big-endian (16 bytes)."""
    h = checksum.fnv1(data or b"", checksum.FNV_128)
    return h.to_bytes(SIZE_FNV1_128, "big")


def fnv1a_128(data: bytes | None = None) -> bytes:
    """Returns the FNV-1a 128-bit hash of `data`, big-endian (16 bytes)."""
    h = checksum.fnv1a(data or b"", checksum.FNV_128)
    return h.to_bytes(SIZE_FNV1A_128, "big")


def crc32(data: bytes | None = None) -> bytes:
    """Returns the IEEE CRC-32 checksum of `data`, big-endian (4 bytes).

    CRC is an error-detecting code, not a cryptographic hash.
    """
    return checksum.crc32(data or b"").to_bytes(SIZE_CRC32, "big")


def crc64_iso(data: bytes | None = None) -> bytes:
    """Returns the CRC-64 (ISO polynomial) of `data`, big-endian (8 bytes)."""
    crc = checksum.crc64(checksum.CRC64_ISO_TABLE, data or b"")
    return crc.to_bytes(SIZE_CRC64ISO, "big")


def crc64_ecma(data: bytes | None = None) -> bytes:
    """Returns the CRC-64 (ECMA polynomial) of `data`, big-endian (8 bytes)."""
    crc = checksum.crc64(checksum.CRC64_ECMA_TABLE, data or b"")
    return crc.to_bytes(SIZE_CRC64ECMA, "big")


def blake2s_256(data: bytes | None = None) -> bytes:
    """Returns the unkeyed BLAKE2s-256 digest of `data` (32 bytes)."""
    return hashlib.blake2s(data or b"", digest_size=SIZE_BLAKE2S_256).digest()


def blake2b_256(data: bytes | None = None) -> bytes:
    """Returns the unkeyed BLAKE2b-256 digest of `data` (32 bytes).

    The digest size is part of the BLAKE2 parameter block, so this is not a
    truncation of BLAKE2b-512.
    """
    return hashlib.blake2b(data or b"", digest_size=SIZE_BLAKE2B_256).digest()


def blake2b_384(data: bytes | None = None) -> bytes:
    """Returns the unkeyed BLAKE2b-384 digest of `data` (48 bytes)."""
    return hashlib.blake2b(data or b"", digest_size=SIZE_BLAKE2B_384).digest()


def blake2b_512(data: bytes | None = None) -> bytes:
    """Returns the unkeyed BLAKE2b-512 digest of `data` (64 bytes)."""
    return hashlib.blake2b(data or b"", digest_size=SIZE_BLAKE2B_512).digest()


_BY_HASH_ALG: Mapping[schema.HashAlg, HashFunc] = types.MappingProxyType(
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

# Internal and external identifiers share member names.
_BY_ALGORITHM: Mapping[Algorithm, HashFunc] = types.MappingProxyType(
    {
        alg: _BY_HASH_ALG[schema.HashAlg[alg.name]]
        for alg in Algorithm
        if alg is not Algorithm.UNKNOWN
    }
)


def from_algorithm(alg: Algorithm | int) -> HashFunc | None:
    """Returns the hash function registered for an internal identifier.

    Args:
        alg: The algorithm, as an `Algorithm` member or its integer value.

    Returns:
        The hash function, or `None` if `alg` does not name a supported
        algorithm. `Algorithm.UNKNOWN`, integers outside of the enumeration,
        booleans and `schema.HashAlg` members all return `None`.
    """
    resolved = hashing.parse_identifier(Algorithm, alg)
    if resolved is None:
        logger.debug("No hash function for algorithm %r", alg)
        return None
    return _BY_ALGORITHM.get(resolved)


def from_hash_alg(hash_alg: schema.HashAlg | int) -> HashFunc | None:
    """Returns the hash function registered for a configuration identifier.

    Args:
        hash_alg: The algorithm, as a `schema.HashAlg` member or its integer
          value.

    Returns:
        The hash function, or `None` if `hash_alg` does not name a supported
        algorithm.
    """
    resolved = hashing.parse_identifier(schema.HashAlg, hash_alg)
    if resolved is None:
        logger.debug("No hash function for hash algorithm %r", hash_alg)
        return None
    return _BY_HASH_ALG.get(resolved)
