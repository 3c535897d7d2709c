"""
Outbound Adapters

Implementations of the application's outbound ports.
"""
