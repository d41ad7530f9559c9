"""Interactive front-switching menu for a PluralKit system."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from .api import PluralKit
from .config import CONFIG_FILE, data_path, load_config
from .models import Member, System

VERSION_LABEL = "[PK tray v0.1.0.0]"
SYSTEM_ERROR = "Failed to get your system info! Have you set a token in config.json?"


class Command(IntEnum):
    EXIT = 1002
    TEST = 1003
    OPEN_CONFIG = 1004
    MY_SYSTEM = 1005
    SET_FRONT = 1006


@dataclass
class MenuItem:
    """One entry of the menu."""

    label: str = ""
    command: int | None = None
    enabled: bool = True
    checked: bool = False
    separator: bool = False


def _separator() -> MenuItem:
    return MenuItem(separator=True)


def _heading(label: str) -> MenuItem:
    return MenuItem(label, enabled=False)


def format_system_info(system: System, members: Sequence[Member]) -> str:
    """Describe a system and list its members."""
    lines = [
        system.name,
        f"Pronouns: {system.pronouns}",
        system.description,
        "Members:",
    ]
    lines.extend(f"  {member.display_name or member.name}" for member in members)
    return "\n".join(lines)


class TrayApp:
    """A text menu showing the members and letting the user switch fronters."""

    def __init__(
        self,
        api: PluralKit,
        config_path: Path | str | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.api = api
        self.config_path = Path(config_path) if config_path is not None else None
        self.output = output if output is not None else sys.stdout
        self.menu: list[MenuItem] = []
        self.build_menu()

    def _write(self, text: str) -> None:
        self.output.write(text + "\n")

    def build_menu(self) -> list[MenuItem]:
        """Fetch members and fronters and rebuild the menu."""
        menu = [
            _heading(VERSION_LABEL),
            _separator(),
            _heading("[System]"),
            MenuItem("View system info", Command.MY_SYSTEM),
            _separator(),
            _heading("[Fronter]"),
        ]
        members = self.api.get_members("@me")
        fronting = {member.name for member in self.api.get_fronters("@me")}
        if not members:
            menu.append(MenuItem("There are no members!"))
            menu.append(MenuItem("Have you added your token?"))
        menu.extend(
            MenuItem(
                member.name,
                Command.SET_FRONT + index,
                checked=member.name in fronting,
            )
            for index, member in enumerate(members)
        )
        menu.extend(
            [
                _separator(),
                _heading("[Options]"),
                MenuItem("Open config.json", Command.OPEN_CONFIG),
                MenuItem("Exit", Command.EXIT),
            ]
        )
        self.menu = menu
        return menu

    def render_menu(self) -> str:
        """Return the menu as text, each selectable entry led by its number."""
        lines = []
        for item in self.menu:
            if item.separator:
                lines.append("-" * 24)
            elif not item.enabled:
                lines.append(item.label)
            else:
                key = "" if item.command is None else str(int(item.command))
                mark = "x" if item.checked else " "
                lines.append(f"{key:>6} [{mark}] {item.label}")
        return "\n".join(lines)

    def handle_click(self, item: int) -> bool:
        """Act on a chosen entry; return False when the app should stop."""
        if item == Command.EXIT:
            return False
        if item == Command.TEST:
            self._write("TEST!!")
        elif item == Command.OPEN_CONFIG:
            self.open_config()
        elif item == Command.MY_SYSTEM:
            self.show_system()
        else:
            self._select_member(item)
        return True

    def _select_member(self, item: int) -> None:
        entry = next(
            (e for e in self.menu if e.command is not None and e.command == item),
            None,
        )
        if entry is None:
            return
        for member in self.api.get_members("@me"):
            if member.name == entry.label:
                self.api.set_fronters([member.id])
                break
        for other in self.menu:
            other.checked = False
        entry.checked = True

    def show_system(self) -> str:
        """Write the user's system info, or an error if it cannot be fetched."""
        system = self.api.get_system("@me")
        if system is None:
            text = f"Error: {SYSTEM_ERROR}"
        else:
            text = format_system_info(system, self.api.get_members(system))
        self._write(text)
        return text

    def open_config(self) -> None:
        """Open the config file in an editor."""
        if self.config_path is None:
            return
        path = str(self.config_path)
        editor = os.environ.get("EDITOR")
        if editor:
            subprocess.Popen([editor, path])
        elif hasattr(os, "startfile"):
            os.startfile(path, "edit")
        elif sys.platform == "darwin":
            subprocess.Popen(["open", path])
        else:
            subprocess.Popen(["xdg-open", path])

    def run(self, lines: Iterable[str] | None = None) -> None:
        """Show the menu and act on each entered number until Exit."""
        source = sys.stdin if lines is None else lines
        self._write(self.render_menu())
        for line in source:
            text = line.strip()
            if not text:
                self._write(self.render_menu())
                continue
            try:
                item = int(text)
            except ValueError:
                self._write(f"Unknown item: {text}")
                continue
            if not self.handle_click(item):
                break
            self._write(self.render_menu())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pktray", description="Switch PluralKit fronters from a menu."
    )
    parser.add_argument(
        "--data-dir", type=Path, default=None, help="folder holding config.json"
    )
    args = parser.parse_args(argv)
    folder = args.data_dir if args.data_dir is not None else data_path()
    config = load_config(folder)
    config_path = folder / CONFIG_FILE if folder is not None else None
    app = TrayApp(PluralKit(config), config_path, sys.stdout)
    app.run()
    return 0