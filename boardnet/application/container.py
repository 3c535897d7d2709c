"""
Application Container

Dependency injection container that wires ports to adapters and manages service lifecycle.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from boardnet.config.settings import Settings


@dataclass
class Container:
    """
    Dependency injection container.

    Wires hexagonal architecture components:
    - Ports define contracts
    - Adapters implement ports
    - Services orchestrate domain logic

    A roster path selects the file repository; without one, an empty
    in-memory repository is used.
    """
    settings: Settings = field(default_factory=Settings)
    roster_path: Optional[Union[str, Path]] = None

    _repository: Optional[object] = field(default=None, repr=False)
    _service: Optional[object] = field(default=None, repr=False)

    @classmethod
    def from_settings(
        cls, settings: Settings, roster_path: Optional[Union[str, Path]] = None,
    ) -> "Container":
        """Create container from settings."""
        return cls(settings=settings, roster_path=roster_path)

    def member_repository(self):
        """Get the member repository singleton."""
        if not self._repository:
            # Lazy import to avoid circular dependencies
            if self.roster_path is not None:
                from boardnet.adapters.outbound.persistence import FileMemberRepository
                self._repository = FileMemberRepository(self.roster_path)
            else:
                from boardnet.adapters.outbound.persistence import InMemoryMemberRepository
                self._repository = InMemoryMemberRepository()
        return self._repository

    def network_service(self):
        """Get the network use case implementation (singleton, owns the analysis cache)."""
        if not self._service:
            from boardnet.application.services.network_service import NetworkVisualizationService
            self._service = NetworkVisualizationService(
                settings=self.settings,
                repository=self.member_repository(),
            )
        return self._service

    def result_exporter(self):
        """Get JSON export adapter."""
        from boardnet.adapters.outbound.export import JsonResultExporter
        return JsonResultExporter()

    def display_service(self):
        """Get console display service."""
        from boardnet.application.services.display_service import DisplayService
        return DisplayService()

    def close(self) -> None:
        """Close all resources."""
        if self._repository:
            self._repository.close()
            self._repository = None
        self._service = None
