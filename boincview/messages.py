"""Client message log shown in a scroll view, grouped by time and project."""

from __future__ import annotations

import time
from typing import Iterable, Mapping, Optional

from boincview.scrollview import ScrollView

ATTR_TIMESTAMP = 1
ATTR_PROJECT = 2
ATTR_BODY = 3

NO_PROJECT = "_no_"
_CDATA_PREFIX = " ![CDATA["


def strip_cdata(body: str) -> str:
    """Remove a `` ![CDATA[...]] `` wrapper when the body has one."""
    if body.startswith(_CDATA_PREFIX):
        return body[len(_CDATA_PREFIX):len(body) - 3]
    return body


def format_timestamp(timestamp: float) -> str:
    """Local time as day, abbreviated month and unpadded hour, e.g. '5 Mar 7:04'."""
    local = time.localtime(timestamp)
    month = time.strftime("%b", local)
    return f"{local.tm_mday} {month} {local.tm_hour}:{local.tm_min:02d}"


class MessageLog:
    """Appends new client messages to a scroll view.

    A header line with time and project is written only when either differs
    from the previous message's.
    """

    def __init__(self, view: ScrollView) -> None:
        self.view = view
        self.last_seqno = 0
        self._project_old = ""
        self._timestamp_old = ""

    def reset(self) -> None:
        """Forget everything shown, e.g. when switching servers."""
        self.view.clear()
        self.last_seqno = 0

    def update(
        self, msgs: Optional[Iterable[Mapping]], last_seqno: int
    ) -> bool:
        """Add messages newer than those already shown.

        ``msgs`` holds mappings with ``seqno``, ``body``, ``time`` and optional
        ``project``; None means no data, which clears the view. Returns True
        when the view was changed.
        """
        if msgs is None:
            self.reset()
            return True
        if self.last_seqno == last_seqno:
            return False
        if self.last_seqno == 0:
            self.view.clear()
        for msg in msgs:
            if int(msg.get("seqno", 0)) <= self.last_seqno:
                continue
            body = msg.get("body")
            stamp = msg.get("time")
            if body is None or stamp is None:
                continue
            timestamp = format_timestamp(int(stamp))
            project = msg.get("project")
            project = NO_PROJECT if project is None else str(project)
            if timestamp != self._timestamp_old or project != self._project_old:
                header = self.view.add_text(ATTR_TIMESTAMP, "%s ", timestamp)
                header.append(ATTR_PROJECT, "%s", project)
                self._timestamp_old = timestamp
                self._project_old = project
            self.view.add_text(ATTR_BODY, "%s", strip_cdata(str(body)))
        self.last_seqno = last_seqno
        self.view.set_autoscroll(True)
        return True