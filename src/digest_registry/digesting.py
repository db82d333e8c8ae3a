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

"""High level API for selecting a digest from configuration.

Components that read a `schema.HashAlg` from their configuration (request
signing, CSRF tokens, consistent hashing of upstreams) use this module to turn
it into a digest with a known name and size:

```python
config = digest_registry.digesting.Config().use_hmac(
    key=b"secret", hash_alg=schema.HashAlg.SHA256
)
token = config.digest(b"session-id")
assert token.algorithm == "hmac-sha256"
assert token.digest_size == config.digest_size == 32
```

Digesting with the default configuration is plain SHA-256:

```python
digest_registry.digesting.digest(b"abc").digest_hex
```

Unlike the lookups in `hash` and `mac`, which answer `None` for an unknown
algorithm, the configuration rejects it with a `ValueError` at the time the
algorithm is chosen.
"""

import logging
import sys

from digest_registry import hash as hash_lib
from digest_registry import mac
from digest_registry import schema
from digest_registry._hashing import hashing


if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


logger = logging.getLogger(__name__)


def digest(data: bytes | None) -> hashing.Digest:
    """Digests `data` using the default configuration (SHA-256)."""
    return Config().digest(data)


class Config:
    """Configuration to use when digesting data.

    The configuration is either a plain hash or an HMAC under a secret key.
    In both cases the primitive is named by a `schema.HashAlg`. The default
    configuration is a plain SHA-256.

    Instances are meant to be built once, from configuration, and then used
    for every digest. They are not meant to be mutated while shared between
    threads.
    """

    def __init__(self):
        """Initializes the default configuration for digesting."""
        self.use_hash()

    def _resolve(self, hash_alg: schema.HashAlg | int) -> schema.HashAlg:
        resolved = hashing.parse_identifier(schema.HashAlg, hash_alg)
        if resolved is None:
            raise ValueError(f"Unsupported hash algorithm {hash_alg!r}")
        if resolved not in hashing.HASH_SIZE:
            raise ValueError(f"Unsupported hash algorithm {resolved.name}")
        return resolved

    def use_hash(
        self, hash_alg: schema.HashAlg | int = schema.HashAlg.SHA256
    ) -> Self:
        """Configures a plain hash.

        Args:
            hash_alg: The hash algorithm to use. Default is SHA-256.

        Returns:
            The new digesting configuration.

        Raises:
            ValueError: The algorithm is not supported.
        """
        hash_alg = self._resolve(hash_alg)
        hash_func = hash_lib.from_hash_alg(hash_alg)
        if hash_func is None:
            raise ValueError(f"Unsupported hash algorithm {hash_alg.name}")

        self._hash_alg = hash_alg
        self._digest_func = hash_func
        self._digest_name = hash_alg.name.lower()
        logger.debug("Configured %s digest", self._digest_name)
        return self

    def use_hmac(
        self,
        *,
        key: bytes,
        hash_alg: schema.HashAlg | int = schema.HashAlg.SHA256,
    ) -> Self:
        """Configures an HMAC under a secret key.

        Choosing an FNV or CRC primitive is allowed for compatibility with
        existing configuration, but it is logged as a warning: those MACs do
        not authenticate anything.

        Args:
            key: The secret key.
            hash_alg: The primitive of the HMAC. Default is SHA-256.

        Returns:
            The new digesting configuration.

        Raises:
            ValueError: The algorithm is not supported.
        """
        hash_alg = self._resolve(hash_alg)
        mac_func = mac.from_hash_alg(hash_alg)
        if mac_func is None:
            raise ValueError(f"Unsupported hash algorithm {hash_alg.name}")

        if mac.Algorithm[hash_alg.name] in mac.NON_CRYPTOGRAPHIC:
            logger.warning(
                "HMAC over %s is not a secure message authentication code",
                hash_alg.name,
            )

        self._hash_alg = hash_alg
        self._digest_func = lambda data: mac_func(data, key)
        self._digest_name = f"hmac-{hash_alg.name.lower()}"
        logger.debug("Configured %s digest", self._digest_name)
        return self

    @property
    def hash_alg(self) -> schema.HashAlg:
        """The configured primitive."""
        return self._hash_alg

    @property
    def digest_name(self) -> str:
        """The name of the configured digest, such as `hmac-sha256`."""
        return self._digest_name

    @property
    def digest_size(self) -> int:
        """The size, in bytes, of every digest this configuration computes."""
        return hashing.HASH_SIZE[self._hash_alg]

    def digest(self, data: bytes | None) -> hashing.Digest:
        """Digests `data` using the current configuration."""
        return hashing.Digest(self._digest_name, self._digest_func(data))
