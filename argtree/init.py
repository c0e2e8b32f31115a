# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""init.py"""
from pathlib import Path

from argtree.console import console

TEMPLATE_TASKS = """\
# This file is used by argtree.yaml to define command handlers.
# Run: argtree --help to see available commands.

import asyncio


async def greet(options):
    greeting = "HELLO" if options["loud"] else "Hello"
    print(f"{greeting}, {options['name']}!")


def to_settings(options):
    return {**options, "target": options["target"].upper()}


async def migrate(options):
    if options["dry"]:
        print(f"Would migrate {options['target']}")
        return
    await asyncio.sleep(1)
    print(f"Migrated {options['target']}")
"""

TEMPLATE_CONFIG = """\
# argtree.yaml — Config-driven command tree
# Handlers and transforms are dotted paths to Python callables in tasks.py
program_name: sample
version: 0.1.0
commands:
  - name: greet
    aliases: [hi]
    description: Say hello
    handler: tasks.greet
    options:
      name: {kind: positional, is_required: true, description: Who to greet}
      loud: {kind: boolean, aliases: [l], default_value: false}

  - name: db
    description: Database tools
    subcommands:
      - name: migrate
        description: Run migrations
        handler: tasks.migrate
        transform: tasks.to_settings
        options:
          dry: {kind: boolean, aliases: [d], default_value: false}
          target: {kind: string, choices: [up, down], is_required: true}
"""

GLOBAL_TEMPLATE_TASKS = """\
def cleanup(options):
    print("Cleaning temp files...")
"""

GLOBAL_CONFIG = """\
program_name: argtree
commands:
  - name: cleanup
    aliases: [clean]
    description: Cleanup temp files
    handler: tasks.cleanup
"""


def init_project(name: str = ".") -> None:
    target = Path(name).resolve()
    target.mkdir(parents=True, exist_ok=True)

    tasks_path = target / "tasks.py"
    config_path = target / "argtree.yaml"

    if tasks_path.exists() or config_path.exists():
        console.print(f"[warning]Project already initialized at {target}[/]")
        return None

    tasks_path.write_text(TEMPLATE_TASKS)
    config_path.write_text(TEMPLATE_CONFIG)

    console.print(f"Initialized Argtree project in {target}")


def init_global() -> None:
    config_dir = Path.home() / ".config" / "argtree"
    config_dir.mkdir(parents=True, exist_ok=True)

    tasks_path = config_dir / "tasks.py"
    config_path = config_dir / "argtree.yaml"

    if tasks_path.exists() or config_path.exists():
        console.print("[warning]Global Argtree config already exists at ~/.config/argtree[/]")
        return None

    tasks_path.write_text(GLOBAL_TEMPLATE_TASKS)
    config_path.write_text(GLOBAL_CONFIG)

    console.print("Initialized global Argtree config at ~/.config/argtree")
