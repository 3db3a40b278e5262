"""Print a few values from the sample configuration tree.

Run from the repository root::

    python examples/show_config.py [path ...]
"""

from __future__ import annotations

import logging
import pathlib
import sys

from lazyconf import ConfigNode

CONFIG_DIR = pathlib.Path(__file__).resolve().parent / "config"

DEFAULT_PATHS = [
    "debug",
    "logging/level",
    "db/driver",
    "db/primary/host",
    "db/primary/replicas/0",
    "cache/servers/1/host",
    "services/service/0/url",
    "features/beta",
    "limits/requests/per_minute",
    "missing/key",
]


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    cfg = ConfigNode(CONFIG_DIR)
    for path in argv or DEFAULT_PATHS:
        found = cfg.find(path)
        print(f"{path} = {found.value!r}" if found else f"{path} is not set")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
