"""Persistent settings kept as a small XML file in the user's home directory."""

from __future__ import annotations

import copy
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from boincview.textutil import rtrim

CONFIG_TAG = "boinctui_cfg"
DEFAULT_FILENAME = ".boinctui.cfg"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = "31416"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ServerEntry:
    """One client the program can connect to."""

    host: str
    port: str
    password: str = ""


def _to_int(text: Optional[str]) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _find(node: ET.Element, name: str) -> Optional[ET.Element]:
    """First element called ``name`` below ``node``."""
    return next((item for item in node.iter(name) if item is not node), None)


def _text(node: ET.Element, name: str) -> str:
    item = _find(node, name)
    if item is None or item.text is None:
        return ""
    return item.text


class Config:
    """The settings tree, loaded from ``home/filename``.

    With no file name nothing is read or written and defaults are used.
    ``is_default`` is True when no file was found; ``errmsg`` holds the
    reason a file could not be parsed, and such a file is never overwritten.
    """

    def __init__(
        self,
        filename: Optional[str] = DEFAULT_FILENAME,
        home: Optional[Union[str, Path]] = None,
    ) -> None:
        if filename is None:
            self.path: Optional[Path] = None
        else:
            base = Path(home) if home is not None else Path.home()
            self.path = base / filename
        self.root: Optional[ET.Element] = None
        self.is_default = True
        self.errmsg = ""
        self.load()
        self.ascii_line_draw = self.get_int("line_draw_mode")

    def load(self) -> None:
        """Read the file, or build the default settings when there is none."""
        self.is_default = True
        self.errmsg = ""
        self.root = None
        if self.path is None or not self.path.exists():
            self.generate_default()
            return
        try:
            data = self.path.read_bytes()
        except OSError:
            return
        try:
            tree = ET.fromstring(data)
        except ET.ParseError as exc:
            self.errmsg = f"{self.path}\n{exc}"
        else:
            self.root = tree if tree.tag == CONFIG_TAG else _find(tree, CONFIG_TAG)
        self.is_default = False

    def save(self) -> None:
        """Write the settings back unless loading failed or there is no file."""
        if self.errmsg or self.path is None or self.root is None:
            return
        tree = copy.deepcopy(self.root)
        ET.indent(tree)
        self.path.write_text(ET.tostring(tree, encoding="unicode") + "\n", encoding="utf-8")

    def generate_default(self) -> None:
        """Fresh settings holding only the local client."""
        self.root = ET.Element(CONFIG_TAG)
        self.add_host(DEFAULT_HOST, DEFAULT_PORT, "")

    def get_int(self, name: str, node: Optional[ET.Element] = None) -> int:
        """Integer value of ``name`` searched below ``node`` (default: the root); 0 if absent."""
        base = node if node is not None else self.root
        if base is None:
            return 0
        item = _find(base, name)
        return _to_int(item.text) if item is not None else 0

    def set_int(self, name: str, value: int, node: Optional[ET.Element] = None) -> None:
        """Set ``name`` below ``node`` (default: the root), creating it if needed."""
        base = node if node is not None else self.root
        if base is None:
            return
        item = _find(base, name)
        if item is None:
            item = ET.SubElement(base, name)
        item.text = str(int(value))

    def add_host(self, host: str, port: str, password: str = "") -> None:
        """Add a server entry; entries with an empty host or port are skipped."""
        if not host or not port or self.root is None:
            return
        server = ET.SubElement(self.root, "server")
        ET.SubElement(server, "host").text = host
        ET.SubElement(server, "port").text = port
        if password:
            ET.SubElement(server, "pwd").text = password

    def servers(self) -> List[ServerEntry]:
        """All server entries in file order."""
        if self.root is None:
            return []
        return [
            ServerEntry(_text(item, "host"), _text(item, "port"), _text(item, "pwd"))
            for item in self.root.findall("server")
        ]

    def replace_servers(self, entries: Iterable[ServerEntry]) -> None:
        """Drop every server entry and add ``entries`` with trailing spaces trimmed."""
        if self.root is None:
            return
        for item in self.root.findall("server"):
            self.root.remove(item)
        for entry in entries:
            self.add_host(rtrim(entry.host), rtrim(entry.port), rtrim(entry.password))