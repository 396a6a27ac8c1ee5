"""
PipelineLib - Pipeline orchestration

This module sequences the Pixel Weave stages and guards the input formats.
"""

from PW_Libs.PipelineLib.interleave_pipeline import (
    PipelineConfig,
    check_formats,
    run_interleave_pipeline,
)

__all__ = [
    "PipelineConfig",
    "check_formats",
    "run_interleave_pipeline",
]
