"""Resource providers searched by the resolver.

Public API::

    from appcore.providers import DirectoryProvider, MappingProvider
"""

from appcore.providers.filesystem import (
    SYSTEM_DIR,
    DirectoryProvider,
    FileHandle,
    system_provider,
)
from appcore.providers.memory import MappingProvider, StringHandle
from appcore.providers.protocol import ResourceProvider, TemplateHandle

__all__ = [
    "SYSTEM_DIR",
    "DirectoryProvider",
    "FileHandle",
    "MappingProvider",
    "ResourceProvider",
    "StringHandle",
    "TemplateHandle",
    "system_provider",
]
