"""Domain layer exports."""

from orchestrator.domain.pipeline_run import PipelineRun, PipelineState
from orchestrator.domain.voice_message_pipeline import VoiceMessagePipeline

__all__ = ["PipelineRun", "PipelineState", "VoiceMessagePipeline"]
