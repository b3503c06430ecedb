# xcorelib

Small building blocks for low-level code, in plain Python with no
dependencies:

- `xcorelib.crc`: `crc7_update`, `crc8_dallas_update`, `crc16_ccitt_update`
  and `crc32_update`. Each takes the running value and a bytes-like object and
  returns the new value.
- `xcorelib.unicode`: conversion between UTF-8 bytes and UTF-16 code units
  (`to_utf16`, `from_utf16`) and the output length of each conversion
  (`length_to_utf16`, `length_from_utf16`). A zero element ends the input, and
  an optional `max_length` limit counts the terminator, so at most
  `max_length - 1` elements are produced. Unpaired surrogates are dropped.
- `xcorelib.bits`: `count_leading_zeros32`, `reverse_bits32`,
  `saturated_add` and `saturated_sub` for 8, 16, 32 and 64-bit signed or
  unsigned integers, and the byte-order helpers `byte_swap`, `to_big_endian`,
  `from_big_endian`, `to_little_endian` and `from_little_endian`.
- `xcorelib.atomic`: `AtomicUnsigned`, a fixed-width unsigned integer with
  `load`, `store`, `compare_exchange`, `fetch_add`, `fetch_sub`, `fetch_and`
  and `fetch_or`. Arithmetic wraps modulo 2**width.
- `xcorelib.mutex`: `Mutex`, a non-recursive lock with `lock`, `unlock`,
  `try_lock(interval)` in milliseconds, a `locked` property and
  context-manager support.
- `xcorelib.semaphore`: `Semaphore`, a counting semaphore with `post`, `wait`,
  `try_wait(timeout)` in milliseconds and `value()`.

Values that do not fit the requested width, unsupported widths and negative
timeouts raise `ValueError`.

## Installation

```
pip install xcorelib
```

## Examples

Checksums:

```python
from xcorelib.crc import crc8_dallas_update, crc16_ccitt_update, crc32_update

print(hex(crc32_update(0, b"123456789")))            # 0xcbf43926
print(hex(crc16_ccitt_update(0xFFFF, b"123456789")))  # 0x29b1
print(hex(crc8_dallas_update(0, b"123456789")))       # 0xa1
```

UTF-8 and UTF-16:

```python
from xcorelib.unicode import from_utf16, length_to_utf16, to_utf16

units = to_utf16("Строка".encode("utf-8"))
print([hex(u) for u in units])   # ['0x421', '0x442', '0x440', '0x43e', '0x43a', '0x430']
print(length_to_utf16("Строка".encode("utf-8")))  # 6
print(from_utf16(units).decode("utf-8"))          # Строка
print(from_utf16(units, max_length=6))            # only the first two characters fit
```

Bits and saturating arithmetic:

```python
from xcorelib.bits import byte_swap, count_leading_zeros32, saturated_add, saturated_sub

print(count_leading_zeros32(1))                       # 31
print(saturated_add(120, 10, width=8))                # 127
print(saturated_sub(5, 10, width=8, signed=False))    # 0
print(hex(byte_swap(0x1234, 16)))                     # 0x3412
```

Atomics, mutex and semaphore:

```python
from xcorelib.atomic import AtomicUnsigned
from xcorelib.mutex import Mutex
from xcorelib.semaphore import Semaphore

counter = AtomicUnsigned(0xFF, width=8)
print(counter.fetch_add(1), counter.load())   # 255 0

mutex = Mutex()
with mutex:
    print(mutex.try_lock(10))   # False: already held

sem = Semaphore(1)
sem.wait()
print(sem.try_wait(0))   # False
sem.post()
print(sem.value())       # 1
```

## What the package does not do

It has no calendar or clock support (no conversion between dates and UNIX
timestamps), no thread wrapper or sleep helper, and no shared error-code
type or abstract device interface classes. Errors are reported with
Python's own exceptions.

## Running the tests

```
pip install xcorelib[test]
pytest
```