"""Pure-Python Keccak sponge, SHA-256, AES, DRBG and seed expander, with sysfs and UART helpers."""

__version__ = "0.1.0"