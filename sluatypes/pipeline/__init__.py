"""Generation options, run result carriers and entrypoints."""

from sluatypes.pipeline.entrypoints import build_type_system, run_build, run_generate
from sluatypes.pipeline.options import GenerateOptions
from sluatypes.pipeline.results import BuildRunResult, GenerateRunResult

__all__ = [
    "BuildRunResult",
    "GenerateOptions",
    "GenerateRunResult",
    "build_type_system",
    "run_build",
    "run_generate",
]
