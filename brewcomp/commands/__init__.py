"""Command metadata for completion generation.

This package provides:
- models: Named argument types (ArgKind, LiteralAlternative, UnknownKind)
  and the MetadataAccessor protocol
- parsing: Named argument type and description parsing
- manifest: The manifest-backed MetadataAccessor implementation
"""

from .manifest import ManifestMetadata, load_manifest
from .models import ArgKind, CommandInfo, LiteralAlternative, MetadataAccessor, NamedArgType, UnknownKind

__all__ = [
    "ArgKind",
    "CommandInfo",
    "LiteralAlternative",
    "ManifestMetadata",
    "MetadataAccessor",
    "NamedArgType",
    "UnknownKind",
    "load_manifest",
]
