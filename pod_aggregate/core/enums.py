"""Platform, product and support file enumerations."""

from __future__ import annotations

from enum import Enum


class PlatformName(Enum):
    """Supported target platforms."""

    IOS = "ios"
    OSX = "osx"
    TVOS = "tvos"
    WATCHOS = "watchos"


class ProductType(Enum):
    """Kind of product an aggregate target builds."""

    STATIC_LIBRARY = "static_library"
    FRAMEWORK = "framework"


class SupportFileKind(Enum):
    """Generated integration files named after the target label."""

    ACKNOWLEDGEMENTS = "acknowledgements"
    COPY_RESOURCES_SCRIPT = "copy_resources_script"
    EMBED_FRAMEWORKS_SCRIPT = "embed_frameworks_script"
