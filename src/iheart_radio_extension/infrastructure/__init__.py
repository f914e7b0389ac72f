"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- HTTP (shared async client wrapper)
- iHeart (directory API records, decoding, PLS parsing, the extension itself)
- Settings storage (in-memory host settings store)
"""
