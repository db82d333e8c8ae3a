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

"""Declarations shared by the hash and MAC registries.

Every digest is computed by a plain function. There are two shapes:

- `HashFunc`, called as `fn(data)`;
- `MACFunc`, called as `fn(message, key)`.

In both cases a `None` argument is treated exactly like `b""` and the result
is always `HASH_SIZE[alg]` bytes long.

`HASH_SIZE` is the only place where digest sizes are written down. The
per-algorithm `SIZE_*` constants of the public modules are read from it.
"""

from collections.abc import Callable, Mapping
import dataclasses
import enum
import types
from typing import Any, TypeAlias, TypeVar

from digest_registry import schema


HashFunc: TypeAlias = Callable[[bytes | None], bytes]
MACFunc: TypeAlias = Callable[[bytes | None, bytes | None], bytes]

_E = TypeVar("_E", bound=enum.Enum)


HASH_SIZE: Mapping[schema.HashAlg, int] = types.MappingProxyType(
    {
        schema.HashAlg.SHA1: 20,
        schema.HashAlg.SHA224: 28,
        schema.HashAlg.SHA256: 32,
        schema.HashAlg.SHA384: 48,
        schema.HashAlg.SHA512: 64,
        schema.HashAlg.SHA512_224: 28,
        schema.HashAlg.SHA512_256: 32,
        schema.HashAlg.SHA3_224: 28,
        schema.HashAlg.SHA3_256: 32,
        schema.HashAlg.SHA3_384: 48,
        schema.HashAlg.SHA3_512: 64,
        schema.HashAlg.SHAKE128: 32,
        schema.HashAlg.SHAKE256: 64,
        schema.HashAlg.MD5: 16,
        schema.HashAlg.FNV1_32: 4,
        schema.HashAlg.FNV1A_32: 4,
        schema.HashAlg.FNV1_64: 8,
        schema.HashAlg.FNV1A_64: 8,
        schema.HashAlg.FNV1_128: 16,
        schema.HashAlg.FNV1A_128: 16,
        schema.HashAlg.CRC32: 4,
        schema.HashAlg.CRC64ISO: 8,
        schema.HashAlg.CRC64ECMA: 8,
        schema.HashAlg.BLAKE2S_256: 32,
        schema.HashAlg.BLAKE2B_256: 32,
        schema.HashAlg.BLAKE2B_384: 48,
        schema.HashAlg.BLAKE2B_512: 64,
    }
)


@dataclasses.dataclass(frozen=True)
class Digest:
    """A digest computed through `digesting.Config`."""

    algorithm: str
    digest_value: bytes

    @property
    def digest_hex(self) -> str:
        """Hexadecimal, human readable, equivalent of `digest`."""
        return self.digest_value.hex()

    @property
    def digest_size(self) -> int:
        """The size, in bytes, of the digest."""
        return len(self.digest_value)


def parse_identifier(enum_type: type[_E], value: Any) -> _E | None:
    """Returns the member of `enum_type` named by `value`, or `None`.

    Only members of `enum_type` and plain integers identify an algorithm.
    Booleans, floats, strings and members of other enumerations never do, even
    when they compare equal to a member's value.
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, (bool, enum.Enum)) or not isinstance(value, int):
        return None
    try:
        return enum_type(value)
    except ValueError:
        return None
