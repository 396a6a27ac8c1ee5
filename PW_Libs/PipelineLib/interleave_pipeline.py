"""
Interleave Pipeline for Pixel Weave.

This module sequences the pipeline stages: load both inputs, guard their
formats, standardize their sizes, interleave their pixels and write the
result. Stages run strictly in order and the first error propagates
unchanged to the caller.

Classes:
    PipelineConfig: Options for one pipeline run

Functions:
    check_formats: Format guard for the two input images
    run_interleave_pipeline: Run the whole pipeline end to end
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from PW_Libs.constants import (
    DEFAULT_FORMAT_POLICY,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_OUTPUT_FORMAT,
    FORMAT_POLICIES,
    FORMAT_POLICY_DISTINCT,
)
from PW_Libs.errors import DifferentImageFormats
from PW_Libs.ImageEditingLib.image_editing_ops import combine_images, standardise_size
from PW_Libs.ImageEditingLib.image_models import CombinedImage
from PW_Libs.NodesLib.image_import_node import load_image
from PW_Libs.NodesLib.output_node import OutputConfig, save_combined_image

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Options for one pipeline run.

    Attributes:
        format_policy: 'distinct' proceeds only when the input formats differ,
                       'same' proceeds only when they match
        output_format: Format to write; None reuses the second input's format
        strict_length: Require the combined buffer to fill the output exactly
        quality: JPEG quality 1-100 when writing JPEG
        create_directories: Create missing output directories
        overwrite: Replace an existing output file
    """
    format_policy: str = DEFAULT_FORMAT_POLICY
    output_format: Optional[str] = None
    strict_length: bool = False
    quality: int = DEFAULT_JPEG_QUALITY
    create_directories: bool = True
    overwrite: bool = True

    def __post_init__(self):
        """Validate configuration values."""
        if self.format_policy not in FORMAT_POLICIES:
            raise ValueError(
                f"Unknown format_policy '{self.format_policy}'. "
                f"Use one of: {', '.join(FORMAT_POLICIES)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PipelineConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def output_config(self) -> OutputConfig:
        """Build the writer configuration for this run."""
        return OutputConfig(
            save_format=self.output_format,
            quality=self.quality,
            create_directories=self.create_directories,
            overwrite=self.overwrite,
        )


def check_formats(
    format_a: Optional[str],
    format_b: Optional[str],
    policy: str = DEFAULT_FORMAT_POLICY,
) -> None:
    """
    Format guard for the two input images.

    Args:
        format_a: Format tag of the first input
        format_b: Format tag of the second input
        policy: 'distinct' rejects equal tags, 'same' rejects unequal tags

    Raises:
        DifferentImageFormats: If the pair is rejected by ``policy``
        ValueError: If ``policy`` is unknown
    """
    if policy not in FORMAT_POLICIES:
        raise ValueError(f"Unknown format policy: {policy}")

    formats_match = format_a == format_b
    if policy == FORMAT_POLICY_DISTINCT:
        rejected = formats_match
    else:
        rejected = not formats_match

    if rejected:
        raise DifferentImageFormats(format_a, format_b, policy)


def run_interleave_pipeline(
    image_a: Union[str, Path],
    image_b: Union[str, Path],
    output: Union[str, Path],
    config: Optional[PipelineConfig] = None,
) -> Path:
    """
    Combine two images into one by alternating their pixels.

    Args:
        image_a: Path to the first input, supplies even pixels
        image_b: Path to the second input, supplies odd pixels
        output: Path of the image to write
        config: Optional run configuration

    Returns:
        Path where the combined image was saved

    Raises:
        ImageErrors: The first failure of any stage; nothing is written
    """
    config = config or PipelineConfig()

    grid_a = load_image(image_a)
    grid_b = load_image(image_b)

    check_formats(grid_a.format, grid_b.format, config.format_policy)

    grid_a, grid_b = standardise_size(grid_a, grid_b)
    logger.debug(f"Standardized both inputs to {grid_a.dimensions}")

    combined = CombinedImage(grid_a.width, grid_a.height, str(output))
    combined.set_data(combine_images(grid_a, grid_b), strict=config.strict_length)

    target_format = config.output_format or grid_b.format or DEFAULT_OUTPUT_FORMAT
    saved_path = save_combined_image(combined, target_format, config.output_config())

    logger.info(
        f"Interleaved {image_a} ({grid_a.format}) and {image_b} ({grid_b.format}) "
        f"into {saved_path}"
    )
    return saved_path
