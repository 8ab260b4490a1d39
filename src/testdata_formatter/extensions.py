"""File-extension tokens used as format identifiers and output suffixes."""

from __future__ import annotations

EXT_GZ = ".gz"
EXT_XZ = ".xz"
EXT_TAR = ".tar"
EXT_QCOW2 = ".qcow2"
# Empty token selects the no-op conversion.
EXT_NOOP = ""

ISO_SUFFIX = ".iso"
