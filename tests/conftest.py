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

"""Test fixtures to share between tests. Not part of the public API."""

import random

import pytest

from digest_registry import schema
from tests import test_support


@pytest.fixture(params=test_support.ALL_ALGORITHMS)
def algorithm_name(request) -> str:
    """Every supported algorithm, by member name."""
    return request.param


@pytest.fixture
def hash_alg(algorithm_name) -> schema.HashAlg:
    """Every supported algorithm, as a configuration identifier."""
    return schema.HashAlg[algorithm_name]


@pytest.fixture
def random_data() -> bytes:
    """A few kilobytes of reproducible pseudo-random data."""
    rng = random.Random(42)
    return rng.randbytes(4096 + 17)


@pytest.fixture
def long_key() -> bytes:
    """A key longer than the block of every supported primitive."""
    return bytes(range(256)) * 2
