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

"""Non-cryptographic checksums: CRC-32, CRC-64 and FNV.

CRC-32 uses the IEEE polynomial from `zlib`. CRC-64 is table driven, with the
reflected polynomials of ISO 3309 and ECMA-182, an all-ones initial value and
an all-ones final XOR (CRC-64/GO-ISO and CRC-64/XZ in the CRC catalogue). FNV
follows the reference offset bases and primes.

All functions return the checksum as an unsigned integer. Serialization to
bytes is the caller's job; the registry writes every value big-endian.

Example usage:
```python
>>> hex(crc64(CRC64_ECMA_TABLE, b"123456789"))
'0x995dc9bbdf1939fa'
>>> hex(fnv1a(b"a", FNV_32))
'0xe40c292c'
```
"""

import dataclasses
import zlib


_MASK_64 = 0xFFFFFFFFFFFFFFFF

CRC64_ISO_POLY = 0xD800000000000000
CRC64_ECMA_POLY = 0xC96C5795D7870F42


def _make_crc64_table(poly: int) -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


CRC64_ISO_TABLE: tuple[int, ...] = _make_crc64_table(CRC64_ISO_POLY)
CRC64_ECMA_TABLE: tuple[int, ...] = _make_crc64_table(CRC64_ECMA_POLY)


def crc32(data: bytes) -> int:
    """Computes the IEEE CRC-32 of `data`."""
    return zlib.crc32(data) & 0xFFFFFFFF


def crc64(table: tuple[int, ...], data: bytes) -> int:
    """Computes the CRC-64 of `data` using one of the reflected tables."""
    crc = _MASK_64
    for b in data:
        crc = table[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK_64


@dataclasses.dataclass(frozen=True)
class FNVParameters:
    """Offset basis and prime of an FNV width."""

    bits: int
    offset_basis: int
    prime: int

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1


FNV_32 = FNVParameters(bits=32, offset_basis=0x811C9DC5, prime=0x01000193)
FNV_64 = FNVParameters(
    bits=64, offset_basis=0xCBF29CE484222325, prime=0x00000100000001B3
)
FNV_128 = FNVParameters(
    bits=128,
    offset_basis=0x6C62272E07BB014262B821756295C58D,
    prime=0x0000000001000000000000000000013B,
)


def fnv1(data: bytes, params: FNVParameters) -> int:
    """FNV-1: multiply by the prime, then XOR the octet."""
    h = params.offset_basis
    prime = params.prime
    mask = params.mask
    for b in data:
        h = ((h * prime) & mask) ^ b
    return h


def fnv1a(data: bytes, params: FNVParameters) -> int:
    """FNV-1a: XOR the octet, then multiply by the prime."""
    h = params.offset_basis
    prime = params.prime
    mask = params.mask
    for b in data:
        h = ((h ^ b) * prime) & mask
    return h
