# Copyright 2025 The Sigstore Authors
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


"""Script for running a benchmark of every hash and MAC in the registry."""

import argparse
import logging
import timeit
from typing import Final

import numpy as np

from digest_registry import hash
from digest_registry import mac
from digest_registry import schema


KB: Final[int] = 1024
MB: Final[int] = 1024 * KB

# Inputs of the reference benchmark: a 62 byte message and a 26 byte key.
DEFAULT_MESSAGE: Final[bytes] = (
    b"1234567890abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
DEFAULT_KEY: Final[bytes] = b"test key test key test key"

_ALL_METHODS: Final[list[str]] = [
    alg.name.lower() for alg in schema.HashAlg if alg != schema.HashAlg.UNKNOWN
]


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Builds the command line parser for the hash experiment."""
    parser = argparse.ArgumentParser(
        description="hash and MAC benchmark data for the digest registry"
    )

    parser.add_argument(
        "--repeat",
        help="how many times to repeat each algorithm",
        type=int,
        default=5,
    )

    parser.add_argument(
        "--number",
        help="how many digests to compute in each repetition",
        type=int,
        default=10000,
    )

    parser.add_argument(
        "--methods",
        help="algorithms to benchmark",
        nargs="+",
        type=str,
        choices=_ALL_METHODS,
        default=_ALL_METHODS,
    )

    parser.add_argument(
        "--data-sizes",
        help="sizes of random data to digest, instead of the default message",
        nargs="+",
        type=int,
    )

    parser.add_argument(
        "--no-mac", help="skip the MAC benchmarks", action="store_true"
    )

    return parser


def _human_size(size: int) -> str:
    if size >= MB:
        return str(size / MB) + " MB"
    elif size >= KB:
        return str(size / KB) + " KB"
    return str(size) + " B"


def _generate_data(size: int) -> bytes:
    if size < 0:
        raise ValueError("Cannot generate negative bytes")
    return np.random.randint(0, 256, size, dtype=np.uint8).tobytes()


def _get_padding(methods: list[str], sizes: list[int]) -> int:
    """Calculates the necessary padding by looking at longest output.

    E.g. "hmac-sha256/62 B: " would require 18 characters of padding.
    """
    longest_size = max((_human_size(s) for s in sizes), key=len)
    return len(f"hmac-{max(methods, key=len)}/{longest_size}: ")


def _measure(func, number: int, repeat: int) -> float:
    times = timeit.repeat(func, number=number, repeat=repeat)
    # Grab the min time, as suggested by the docs
    # https://docs.python.org/3/library/timeit.html#timeit.Timer.repeat
    return min(times) / number


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    np.random.seed(42)
    args = build_parser().parse_args()

    if args.data_sizes:
        inputs = [_generate_data(size) for size in args.data_sizes]
    else:
        inputs = [DEFAULT_MESSAGE]
    padding = _get_padding(args.methods, [len(data) for data in inputs])
    logger.info(
        "Benchmarking %d algorithms over %d inputs",
        len(args.methods),
        len(inputs),
    )

    for data in inputs:
        size = _human_size(len(data))
        for method in args.methods:
            hash_alg = schema.HashAlg[method.upper()]
            hash_func = hash.from_hash_alg(hash_alg)
            measurement = _measure(
                lambda: hash_func(data), args.number, args.repeat
            )
            label = f"{method}/{size}: "
            print(f"{label:<{padding}}{measurement * 1e9:12.1f} ns")

            if args.no_mac:
                continue

            mac_func = mac.from_hash_alg(hash_alg)
            measurement = _measure(
                lambda: mac_func(data, DEFAULT_KEY), args.number, args.repeat
            )
            label = f"hmac-{method}/{size}: "
            print(f"{label:<{padding}}{measurement * 1e9:12.1f} ns")
