"""
Adapters Layer

Concrete implementations of application ports.
"""
