"""express-scaffold: lay out a boilerplate Express.js project and install its dependencies."""

from express_scaffold.config import ScaffoldConfig, resolve_workspace
from express_scaffold.errors import ManifestError, ScaffoldError, StageError
from express_scaffold.pipeline import DependencyPipeline, PipelineResult, PipelineStage
from express_scaffold.project import ExpressProjectSetup, OutcomeKind, SetupOutcome

__all__ = [
    "DependencyPipeline",
    "ExpressProjectSetup",
    "ManifestError",
    "OutcomeKind",
    "PipelineResult",
    "PipelineStage",
    "ScaffoldConfig",
    "ScaffoldError",
    "SetupOutcome",
    "StageError",
    "resolve_workspace",
]

__version__ = "0.1.0"
