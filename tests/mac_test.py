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

import hashlib
import hmac

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac
import pytest

from digest_registry import hash
from digest_registry import mac
from tests import test_support


def _mac_func(name: str) -> mac.MACFunc:
    return getattr(mac, test_support.FUNCTION_NAMES[name])


def _hash_func(name: str) -> hash.HashFunc:
    return getattr(hash, test_support.FUNCTION_NAMES[name])


class TestKnownValues:
    @pytest.mark.parametrize(
        ("name", "index"),
        [
            (name, index)
            for name in test_support.MAC_VECTORS
            for index in range(len(test_support.MAC_CASES))
        ],
    )
    def test_known_value(self, name, index):
        message, key = test_support.MAC_CASES[index]
        expected = test_support.MAC_VECTORS[name][index]

        assert _mac_func(name)(message, key).hex() == expected

    @pytest.mark.parametrize("name", test_support.MAC_VECTORS.keys())
    def test_altered_value_does_not_match(self, name):
        expected = test_support.MAC_VECTORS[name][0]
        altered = test_support.alter_first_hex_digit(expected)
        digest = _mac_func(name)(test_support.MESSAGE, test_support.KEY)

        assert digest.hex() != altered


class TestProperties:
    def test_mac_has_registered_size(self, algorithm_name, random_data):
        expected = test_support.EXPECTED_SIZES[algorithm_name]
        digest = _mac_func(algorithm_name)(random_data, test_support.KEY)

        assert len(digest) == expected

    def test_none_is_empty(self, algorithm_name):
        func = _mac_func(algorithm_name)
        assert func(None, None) == func(b"", b"")
        assert func() == func(b"", b"")
        assert func(test_support.MESSAGE, None) == func(
            test_support.MESSAGE, b""
        )

    def test_keyed_differs_from_plain_hash(self, algorithm_name):
        keyed = _mac_func(algorithm_name)(
            test_support.MESSAGE, test_support.KEY
        )
        plain = _hash_func(algorithm_name)(test_support.MESSAGE)
        assert keyed != plain

        unkeyed = _mac_func(algorithm_name)(test_support.MESSAGE)
        assert unkeyed != plain
        assert _mac_func(algorithm_name)() != _hash_func(algorithm_name)()

    def test_long_key(self, algorithm_name, long_key):
        func = _mac_func(algorithm_name)
        digest = func(test_support.MESSAGE, long_key)

        assert len(digest) == test_support.EXPECTED_SIZES[algorithm_name]
        assert digest == func(test_support.MESSAGE, long_key)

    def test_benchmark_inputs(self, algorithm_name):
        func = _mac_func(algorithm_name)
        digest = func(
            test_support.BENCHMARK_MESSAGE, test_support.BENCHMARK_KEY
        )
        assert len(digest) == test_support.EXPECTED_SIZES[algorithm_name]


class TestAgainstOtherImplementations:
    @pytest.mark.parametrize(
        ("name", "algorithm"),
        [
            ("SHA512_224", hashes.SHA512_224()),
            ("SHA512_256", hashes.SHA512_256()),
            ("SHA256", hashes.SHA256()),
            ("SHA3_256", hashes.SHA3_256()),
        ],
    )
    def test_matches_cryptography_hmac(self, name, algorithm):
        h = crypto_hmac.HMAC(test_support.KEY, algorithm)
        h.update(test_support.MESSAGE)
        expected = h.finalize()

        digest = _mac_func(name)(test_support.MESSAGE, test_support.KEY)
        assert digest == expected

    def test_sha512_256_long_key_matches_cryptography_hmac(self, long_key):
        h = crypto_hmac.HMAC(long_key, hashes.SHA512_256())
        h.update(test_support.MESSAGE)

        assert mac.sha512_256(test_support.MESSAGE, long_key) == h.finalize()

    @pytest.mark.parametrize(
        ("func", "algorithm"),
        [
            (mac.sha512_224, hashes.SHA512_224),
            (mac.sha512_256, hashes.SHA512_256),
        ],
    )
    @pytest.mark.parametrize("key", [None, b""])
    def test_sha512_t_empty_key(self, func, algorithm, key):
        # The empty key pads to 128 zero bytes.
        inner = hashes.Hash(algorithm())
        inner.update(b"\x36" * 128 + test_support.MESSAGE)
        outer = hashes.Hash(algorithm())
        outer.update(b"\x5c" * 128 + inner.finalize())

        assert func(test_support.MESSAGE, key) == outer.finalize()

    @pytest.mark.parametrize("func", [mac.sha512_224, mac.sha512_256])
    def test_sha512_t_empty_message_and_key(self, func):
        assert func(None, None) == func(b"", b"")

    def test_blake2b_is_hmac_not_keyed_blake2(self):
        native = hashlib.blake2b(
            test_support.MESSAGE, digest_size=32, key=test_support.KEY
        ).digest()
        digest = mac.blake2b_256(test_support.MESSAGE, test_support.KEY)
        assert digest != native

    def test_blake2s_matches_stdlib_hmac(self):
        expected = hmac.new(
            test_support.KEY,
            test_support.MESSAGE,
            lambda *args: hashlib.blake2s(*args, digest_size=32),
        ).digest()
        digest = mac.blake2s_256(test_support.MESSAGE, test_support.KEY)
        assert digest == expected


class TestNonCryptographic:
    def test_members(self):
        names = {alg.name for alg in mac.NON_CRYPTOGRAPHIC}
        assert names == {
            "FNV1_32",
            "FNV1A_32",
            "FNV1_64",
            "FNV1A_64",
            "FNV1_128",
            "FNV1A_128",
            "CRC32",
            "CRC64ISO",
            "CRC64ECMA",
        }

    def test_only_first_byte_of_hashed_key_matters(self):
        # A key longer than the block is hashed, then cut to one byte.
        key1 = b"test"
        key2 = hash.crc32(key1)[:1]

        assert mac.crc32(test_support.MESSAGE, key1) == mac.crc32(
            test_support.MESSAGE, key2
        )
