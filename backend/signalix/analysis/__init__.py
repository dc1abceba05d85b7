"""Analysis layer: run orchestration and the narrative boundary."""

from signalix.analysis.narrative import (
    NarrativeContext,
    NarrativeError,
    NarrativeGenerator,
    Verdict,
    build_narrative_context,
    parse_verdict,
)
from signalix.analysis.runner import (
    AnalysisError,
    AnalysisResult,
    AnalysisRunner,
    StageDurations,
)

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalysisRunner",
    "NarrativeContext",
    "NarrativeError",
    "NarrativeGenerator",
    "StageDurations",
    "Verdict",
    "build_narrative_context",
    "parse_verdict",
]
