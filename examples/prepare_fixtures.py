"""Prepare a matrix of compressed/archived fixtures from one raw image.

Usage::

    python examples/prepare_fixtures.py disk.img /tmp/fixtures
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from testdata_formatter import EXT_GZ, EXT_NOOP, EXT_TAR, EXT_XZ, format_test_data
from testdata_formatter.errors import FormatterError

CHAINS: list[tuple[str, ...]] = [
    (EXT_NOOP,),
    (EXT_GZ,),
    (EXT_XZ,),
    (EXT_TAR,),
    (EXT_TAR, EXT_GZ),
    (EXT_TAR, EXT_XZ),
]


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    source, root = Path(argv[1]), Path(argv[2])
    for chain in CHAINS:
        # One directory per chain: staging reuses same-named files.
        target = root / ("".join(chain) or "raw")
        target.mkdir(parents=True, exist_ok=True)
        try:
            out = format_test_data(source, target, *chain)
        except FormatterError as exc:
            print(f"failed {chain}: {exc}", file=sys.stderr)
            return 1
        print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
