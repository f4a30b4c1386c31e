"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of I/O (CSV files, terminal prompts, etc.).
"""
