"""Typed helpers over unstructured composite, claim and composed resources."""

__version__ = "0.1.0"
__all__ = ["objects", "composed", "composite", "claim"]