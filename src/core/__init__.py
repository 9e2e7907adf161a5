"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the normalizer that
are independent of the rendering collaborator.
"""
