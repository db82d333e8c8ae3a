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

"""Registry of hash and HMAC functions shared by gateway components.

The API is split into 4 modules:

- `digest_registry.schema`: the `HashAlg` enumeration with which configuration
  files name a digest algorithm.
- `digest_registry.hash`: one-shot hash functions for 27 algorithms, from
  SHA-1 to BLAKE2b, plus FNV and CRC checksums. Functions can be looked up by
  the internal `hash.Algorithm` or by `schema.HashAlg`, and `hash.HASH_SIZE`
  gives the size of every digest.
- `digest_registry.mac`: one-shot HMAC functions over the same 27 primitives,
  with the same two lookups.
- `digest_registry.digesting`: a configuration object that turns a
  `schema.HashAlg` (and, optionally, a key) into a named digest of known size.

Lookups never raise. Asking for an algorithm that is not supported returns
`None`:

```python
digest_registry.hash.from_hash_alg(digest_registry.schema.HashAlg.UNKNOWN)
```

Every function is a pure function of its inputs and can be called from any
number of threads.
"""

from digest_registry import digesting
from digest_registry import hash
from digest_registry import mac
from digest_registry import schema


__version__ = "1.0.0"


__all__ = ["digesting", "hash", "mac", "schema"]
