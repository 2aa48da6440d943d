"""Job layer package for page pipeline orchestration boundaries."""

from .interfaces import AssetResolutionResult, PageOrchestratorPort, RemoteAppPageResult
from .page_orchestrator import PageOrchestratorConfig, RemoteAppPageOrchestrator

__all__ = [
	"AssetResolutionResult",
	"PageOrchestratorConfig",
	"PageOrchestratorPort",
	"RemoteAppPageOrchestrator",
	"RemoteAppPageResult",
]
