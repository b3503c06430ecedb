"""Low-level helpers: CRC checksums, UTF-8/UTF-16 conversion, bits, atomics, mutex and semaphore."""

__version__ = "0.1.0"

__all__ = ["atomic", "bits", "crc", "mutex", "semaphore", "unicode"]