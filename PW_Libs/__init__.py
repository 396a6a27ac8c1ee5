"""
PW_Libs - Pixel Weave Library Modules

This package contains core functionality for the Pixel Weave project,
organized into specialized sub-packages:

- ImageEditingLib: Image models, size standardization and pixel interleaving
- NodesLib: Image import (decode) and output (encode) stages
- PipelineLib: Format guard and end-to-end pipeline orchestration
"""

__version__ = "0.1.0"
