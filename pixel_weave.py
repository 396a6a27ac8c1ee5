"""
Pixel Weave command line entry point.

Combines two images into a third one whose pixels alternate between the two
sources, starting with the first image.

Usage:
    python pixel_weave.py image_a.png image_b.tiff combined.tiff
    pixel-weave image_a.png image_b.png combined.png --format-policy same
"""

import argparse
import logging
import sys
from typing import List, Optional

from PW_Libs import __version__
from PW_Libs.constants import (
    DEFAULT_FORMAT_POLICY,
    DEFAULT_JPEG_QUALITY,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    FORMAT_POLICIES,
)
from PW_Libs.errors import ImageErrors
from PW_Libs.NodesLib.image_import_node import get_supported_image_formats, is_supported_format
from PW_Libs.PipelineLib.interleave_pipeline import PipelineConfig, run_interleave_pipeline

logger = logging.getLogger("pixel_weave")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-weave",
        description="Combine two images by alternating their pixels.",
        epilog=f"Common formats: {' '.join(get_supported_image_formats())}",
    )
    parser.add_argument("image_a", help="First image, supplies even pixels")
    parser.add_argument("image_b", help="Second image, supplies odd pixels")
    parser.add_argument("output", help="Path of the combined image")
    parser.add_argument(
        "--format-policy",
        choices=FORMAT_POLICIES,
        default=DEFAULT_FORMAT_POLICY,
        help="'distinct' requires the inputs to have different formats, "
             f"'same' requires matching formats (default: {DEFAULT_FORMAT_POLICY})",
    )
    parser.add_argument(
        "--output-format",
        default=None,
        help="Format to write, e.g. PNG (default: format of the second image)",
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=DEFAULT_JPEG_QUALITY,
        help=f"JPEG quality 1-100 (default: {DEFAULT_JPEG_QUALITY})",
    )
    parser.add_argument(
        "--strict-length",
        action="store_true",
        help="Require the combined buffer to fill the output exactly",
    )
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing an existing output file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = PipelineConfig(
        format_policy=args.format_policy,
        output_format=args.output_format,
        strict_length=args.strict_length,
        quality=args.quality,
        overwrite=not args.no_overwrite,
    )

    for image_path in (args.image_a, args.image_b):
        if not is_supported_format(image_path):
            logger.warning(
                f"{image_path} does not have a common image extension; "
                f"its format is sniffed from the contents"
            )

    try:
        saved_path = run_interleave_pipeline(args.image_a, args.image_b, args.output, config)
    except ImageErrors as e:
        logger.debug("Pipeline failed", exc_info=True)
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(saved_path)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
