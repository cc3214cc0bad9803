"""Identifier and file name derivation for aggregate targets.

    c99ext_identifier("Pods-MyApp")   -> "Pods_MyApp"
    c99ext_identifier("3rdParty")     -> "_3rdParty"
    xcconfig_variant("Release/Beta")  -> "release-beta"
"""

from __future__ import annotations

import re

# A leading digit is kept but escaped with an underscore
_LEADING_DIGIT = re.compile(r"^([0-9])")

# Anything outside the C99 extended identifier alphabet
_INVALID_CHARACTER = re.compile(r"[^a-zA-Z0-9_]")

_PATH_SEPARATORS = re.compile(r"[/\\]")


def c99ext_identifier(name: str) -> str:
    """Sanitize *name* into an identifier usable as a source module name.

    Each character outside ``[A-Za-z0-9_]`` becomes ``_`` and a leading digit
    is prefixed with ``_``. The result is stable: sanitizing an already
    sanitized name returns it unchanged.
    """
    if not name:
        return "_"
    return _INVALID_CHARACTER.sub("_", _LEADING_DIGIT.sub(r"_\1", name))


def xcconfig_variant(build_configuration: str) -> str:
    """File name component for a build configuration (``Debug`` -> ``debug``)."""
    return _PATH_SEPARATORS.sub("-", build_configuration).lower()


def xcconfig_basename(
    label: str,
    build_configuration: str | None = None,
    extension: str = ".xcconfig",
) -> str:
    """Return ``<label>.<variant><extension>``, or ``<label><extension>`` without a variant."""
    if build_configuration is None:
        return f"{label}{extension}"
    return f"{label}.{xcconfig_variant(build_configuration)}{extension}"
