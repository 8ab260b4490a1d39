"""Static format table mapping extension tokens to conversion functions."""

from __future__ import annotations

from types import MappingProxyType

from testdata_formatter.adapters.converters import (
    gzip_convert,
    noop_convert,
    qcow2_convert,
    tar_convert,
    xz_convert,
)
from testdata_formatter.errors import UnrecognizedFormatError
from testdata_formatter.extensions import EXT_GZ, EXT_NOOP, EXT_QCOW2, EXT_TAR, EXT_XZ
from testdata_formatter.types import ConversionFunc, FormatTable

FORMAT_TABLE: FormatTable = MappingProxyType(
    {
        EXT_GZ: gzip_convert,
        EXT_XZ: xz_convert,
        EXT_TAR: tar_convert,
        EXT_QCOW2: qcow2_convert,
        EXT_NOOP: noop_convert,
    }
)


def format_names() -> list[str]:
    """Return registered format tokens, sorted."""
    return sorted(FORMAT_TABLE.keys())


def get_converter(token: str) -> ConversionFunc:
    """Look up the conversion function for a format token.

    Parameters
    ----------
    token : str
        Extension token such as ``".gz"``. The bare name (``"gz"``) is also
        accepted.

    Returns
    -------
    ConversionFunc
        Conversion function for the token.

    Raises
    ------
    UnrecognizedFormatError
        If neither the token nor its dotted form is registered.
    """
    try:
        return FORMAT_TABLE[token]
    except KeyError:
        pass
    if token and not token.startswith("."):
        dotted = FORMAT_TABLE.get(f".{token}")
        if dotted is not None:
            return dotted
    raise UnrecognizedFormatError(token)
