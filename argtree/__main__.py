"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import os
import sys
from pathlib import Path
from typing import Any

from argtree.argtree import Argtree
from argtree.command import command
from argtree.config import loader
from argtree.init import init_global, init_project
from argtree.parser.option import positional
from argtree.utils import setup_logging
from argtree.version import __version__


def find_argtree_config() -> Path | None:
    candidates = [
        Path.cwd() / "argtree.yaml",
        Path.cwd() / "argtree.toml",
        Path.cwd() / ".argtree.yaml",
        Path.cwd() / ".argtree.toml",
        Path(os.environ.get("ARGTREE_CONFIG", "argtree.yaml")),
        Path.home() / ".config" / "argtree" / "argtree.yaml",
        Path.home() / ".config" / "argtree" / "argtree.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_argtree_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_builtin_argtree() -> Argtree:
    return Argtree(
        [
            command(
                "init",
                description="Initialize a new Argtree project",
                long_description=(
                    "Create a new Argtree project with sample configuration files. "
                    "If no name is provided, the current directory will be used."
                ),
                options={
                    "name": positional().desc("Name of the new Argtree project").default(".")
                },
                handler=lambda options: init_project(options["name"]),
            ),
            command(
                "init-global",
                description="Initialize Argtree global configuration",
                long_description="Create a global Argtree configuration at ~/.config/argtree/.",
                handler=lambda options: init_global(),
            ),
        ],
        program_name="argtree",
        version=__version__,
    )


def main() -> Any:
    setup_logging(log_filename=None)
    bootstrap_path = bootstrap()
    if not bootstrap_path:
        atr = get_builtin_argtree()
    else:
        atr = loader(bootstrap_path)
    return asyncio.run(atr.main())


if __name__ == "__main__":
    main()
