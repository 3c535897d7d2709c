"""
Application Layer

Use cases, ports and the service wiring around the domain core.
"""
