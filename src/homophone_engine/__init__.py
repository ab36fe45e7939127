"""Homophone resolution engine for speech-recognition candidates."""

from .models import PipelineResult, Reading, ResolutionResult
from .pipeline import HomophoneEngine

__all__ = ["Reading", "ResolutionResult", "PipelineResult", "HomophoneEngine"]
