"""Sv39 helpers, ELF headers, a heap allocator, a PRNG, a printf dialect, a shell parser, grep and wc."""

__version__ = "0.1.0"