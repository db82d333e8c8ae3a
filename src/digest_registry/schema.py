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

"""Algorithm identifiers used by the configuration schema.

Configuration files name digest algorithms with `HashAlg`. The enumeration is
owned by the configuration layer and shared by every component that needs to
pick a hash or a MAC, so its numbering is part of the wire format: values must
never be reused or reordered, new algorithms are appended.

`HashAlg` is deliberately a plain `enum.Enum` and not an `enum.IntEnum`: a
`HashAlg` member never compares equal to a member of the internal
`hash.Algorithm` or `mac.Algorithm` enumerations, even when the ordinals
coincide.
"""

import enum


class HashAlg(enum.Enum):
    """Hash algorithm, as named in configuration."""

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
