# spongenet

Small, dependency-free building blocks for writing a TCP/IP stack in user space.

## Install

    pip install spongenet

## What is inside

- `spongenet.wrapping`: 32-bit wrapping sequence numbers.
  `WrappingInt32(raw_value)` keeps its value modulo 2**32. Adding an
  integer gives a new `WrappingInt32`. Subtracting an integer gives a new
  `WrappingInt32`. Subtracting another `WrappingInt32` gives the signed
  32-bit distance between them as a plain `int`.
  `wrap(n, isn)` turns an absolute 64-bit stream index into a sequence
  number. `unwrap(n, isn, checkpoint)` turns it back and picks the
  absolute index closest to `checkpoint`.
- `spongenet.parser`: `NetParser(buffer)` reads big-endian `u8()`,
  `u16()` and `u32()` fields and `remove_prefix(n)` skips bytes.
  `buffer()` returns what is left. When data runs out, the parser does not
  raise. It sets its `error` attribute to `ParseResult.PACKET_TOO_SHORT`,
  and after that every read returns 0. `has_error()` tells whether this
  has happened, and `as_string(result)` gives a result's display name.
  `NetUnparser` writes fields in network byte order, truncating each
  value to its width. Its methods return the unparser, so calls can be
  chained, and `bytes()` gives the result.
- `spongenet.util`: `InternetChecksum(initial_sum=0)` is the
  ones'-complement sum used by IP and TCP. You can feed it bytes in any
  pieces with `add()` and read the result with `value()`. The module also
  provides:
  - `format_hexdump(data, indent=0)`, which renders 16 bytes per line
    with offsets, hex words and printable characters;
  - `hexdump(data, indent=0, file=None)`, which writes that rendering to
    standard output or to `file`;
  - `timestamp_ms()`, which gives the milliseconds since its first call;
  - `get_random_generator()`, which returns a `random.Random` seeded
    from `os.urandom`.
- `spongenet.errors`: `TaggedError` and `UnixError` are `OSError`
  subclasses whose message is `"<attempt>: <strerror>"`.
  `check_system_call(attempt, return_value, error_code, errno_mask=0)`
  returns `return_value` unless it is negative with an unmasked error
  code, in which case it raises `UnixError`. `notnull(context, value)`
  raises `RuntimeError` when `value` is `None`.

## Example

```python
from spongenet.wrapping import WrappingInt32, wrap, unwrap
from spongenet.parser import NetParser, NetUnparser
from spongenet.util import InternetChecksum

isn = WrappingInt32(15)
seqno = wrap(3 * 2**32 + 17, isn)        # WrappingInt32(raw_value=32)
unwrap(seqno, isn, 3 * 2**32)            # 3 * 2**32 + 17

out = NetUnparser().u16(0x1234).u32(0xDEADBEEF)
parser = NetParser(bytes(out))
parser.u16(), parser.u32()               # (0x1234, 0xDEADBEEF)
parser.u8()                              # 0, and parser.has_error() is True

checksum = InternetChecksum()
checksum.add(b"\x45\x00\x00\x1c")
checksum.value()
```

## What it does not do

spongenet has no sockets and does no network I/O. It also has no byte
stream, no segment reassembler and no TCP sender or receiver. It provides
only the pieces listed above, which a stack built on top of it would use.

## Tests

    pip install -e ".[test]"
    pytest