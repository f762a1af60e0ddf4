"""
Core domain models, codec primitives, and wire-format contracts.

This module contains the HexString value type and everything it depends on.
There are no external systems, no I/O and no shared mutable state.
"""
