"""
Application Ports Package

Interfaces defining boundaries between application and adapters layers.
"""

# Inbound ports (use case interfaces)
from .inbound_ports import INetworkAnalysisUseCase

# Outbound ports (adapter interfaces)
from .outbound_ports import IMemberRepository, IResultExporter

__all__ = [
    # Inbound
    "INetworkAnalysisUseCase",
    # Outbound
    "IMemberRepository",
    "IResultExporter",
]
