# oclcrypto

Small cryptographic building blocks in pure Python, using only the standard
library.

- `oclcrypto.keccak`: the Keccak-f[1600] permutation (`keccak_f1600`, which
  takes 25 unsigned 64-bit lanes and returns a new list) and an incremental
  sponge, `KeccakSponge(rate)`, with `absorb`, `finalize(domain)`, `squeeze`
  and `copy`.
- `oclcrypto.aes`: AES with 16-, 24- or 32-byte keys. `AES(key).ecb(data)`
  encrypts whole 16-byte blocks; `AES(key).ctr(outlen, nonce)` returns
  keystream for a 12-byte nonce followed by a 32-bit big-endian counter
  starting at zero. `aes256ctr(outlen, nonce, key)` does the same for a
  32-byte key.
- `oclcrypto.sha256_core`: `compress(state, data)`, the SHA-256 compression
  function over every whole 64-byte block of `data`.
- `oclcrypto.sha2`: SHA-256. `Sha256` takes whole blocks through
  `update_blocks` and the remainder through `finalize`, which returns the
  digest; `sha256(data)` is the one-shot form.
- `oclcrypto.drbg`: `NistKatDrbg`, the AES-256 CTR DRBG used to generate NIST
  known-answer tests, seeded with 48 bytes of entropy and an optional
  48-byte personalization string.
- `oclcrypto.seedexpander`: `SeedExpander(seed, diversifier, maxlen)`, which
  expands a 32-byte seed and an 8-byte diversifier into a bounded stream read
  with `read(n)`.
- `oclcrypto.int16`: branch-free helpers on signed 16-bit values:
  `negative_mask`, `nonzero_mask`, `zero_mask`, `positive_mask`,
  `unequal_mask`, `equal_mask`, `smaller_mask`, `int16_min`, `int16_max` and
  `minmax`. Masks are `-1` for true and `0` for false.
- `oclcrypto.arena`: `Arena`, a bump allocator over a fixed buffer with
  `push`, `push_zeroed`, `mark` and `pop`; it raises `ArenaOverflowError`
  when a request does not fit.

Two device helpers are included as well:

- `oclcrypto.sysfs`: `read_value`, `write_value`, `print_version` and
  `gen_fname` for unsigned 32-bit decimal values in sysfs attribute files.
- `oclcrypto.uart`: `Uart16550`, which speaks a simple file-transfer
  protocol (control bytes in `Command`) over any binary stream, or over a
  device opened with `Uart16550.open(path)`.

## Installation

```
pip install oclcrypto
```

## Examples

Hashing with the sponge (SHA3-256 uses rate 136 and domain byte `0x06`;
SHAKE128 uses rate 168 and domain byte `0x1F`):

```python
from oclcrypto.keccak import KeccakSponge

digest = KeccakSponge(136).absorb(b"abc").finalize(0x06).squeeze(32)

xof = KeccakSponge(168).absorb(b"seed").finalize(0x1F)
first = xof.squeeze(16)
more = xof.squeeze(48)
```

AES and SHA-256:

```python
from oclcrypto.aes import AES, aes256ctr
from oclcrypto.sha2 import Sha256, sha256

key = bytes(range(32))
block = AES(key).ecb(bytes(16))
keystream = aes256ctr(100, bytes(12), key)

sha256(b"abc").hex()

h = Sha256()
h.update_blocks(bytes(128))
digest = h.finalize(b"tail")
```

Deterministic random bytes:

```python
from oclcrypto.drbg import NistKatDrbg
from oclcrypto.seedexpander import SeedExpander

rng = NistKatDrbg(bytes(range(48)), None, 256)
sample = rng.random_bytes(32)

expander = SeedExpander(bytes(32), bytes(8), 1000)
chunk = expander.read(40)
```

The arena:

```python
from oclcrypto.arena import Arena

arena = Arena(64)
mark = arena.mark()
scratch = arena.push_zeroed(10)  # advances by 12 bytes
arena.pop(mark)
```

Talking to a UART console over an in-memory stream:

```python
import io
from oclcrypto.uart import Uart16550

stream = io.BytesIO()
uart = Uart16550(stream)
uart.sendfile("out.bin", b"\x01\x02\x03")
```

## What the package does not do

It has no ready-made SHA-3, SHAKE or cSHAKE functions; build them from
`KeccakSponge` with the right rate and domain byte. It does not compute Benes
network control bits, and it does not implement the Classic McEliece key
encapsulation itself. The AES code is table-based and makes no claim of
constant-time execution. There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```