"""Task, disk and credit statistics shown in the information panel."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

SECONDS_PER_DAY = 3600 * 24
GIGABYTE = 1024 * 1024 * 1024

SUSPENDED_MARK = "[Susp.] "
NO_NEW_TASKS_MARK = "[N.N.Tsk.] "


@dataclass
class TaskCounts:
    """How many tasks a client holds, by state."""

    all: int = 0
    active: int = 0
    run: int = 0
    queue: int = 0
    done: int = 0
    other: int = 0


@dataclass
class DiskUsage:
    """Disk space figures in bytes."""

    total: float = 0.0
    free: float = 0.0
    boinc: float = 0.0
    allowed: float = 0.0

    def in_gigabytes(self) -> Tuple[float, float, float, float]:
        """Total, free, allowed and client usage in gigabytes."""
        return (
            self.total / GIGABYTE,
            self.free / GIGABYTE,
            self.allowed / GIGABYTE,
            self.boinc / GIGABYTE,
        )


@dataclass
class ProjectStat:
    """Credit statistics of one project."""

    name: str = ""
    status: str = ""
    user: float = 0.0
    host: float = 0.0
    last_stat_time: float = 0.0
    user_last_day: float = 0.0
    host_last_day: float = 0.0

    def sort_key(self) -> Tuple[float, float]:
        """Key for sorting in descending order: newest date first, then most credit."""
        return (self.last_stat_time, self.user_last_day + self.host_last_day)


@dataclass
class StatisticsSummary:
    """Credit totals over all projects plus the per-project figures."""

    user_total: float = 0.0
    user_avg: float = 0.0
    host_total: float = 0.0
    host_avg: float = 0.0
    last_day_user: float = 0.0
    last_day_host: float = 0.0
    last_stat_time: float = 0.0
    projects: List[ProjectStat] = field(default_factory=list)


def find_day(days: Sequence[Mapping], day: float) -> Optional[Mapping]:
    """The entry of ``days`` whose ``day`` equals ``day``, searching from the end."""
    for entry in reversed(days):
        value = entry.get("day")
        if value is not None and float(value) == float(day):
            return entry
    return None


def day_name(timestamp: float, now: Optional[float] = None) -> str:
    """'today', 'yesterday' or '' for ``timestamp`` relative to ``now``."""
    if now is None:
        now = time.time()
    current = int(now) // SECONDS_PER_DAY
    stamp_day = int(timestamp) // SECONDS_PER_DAY
    if current == stamp_day:
        return "today"
    if current == stamp_day + 1:
        return "yesterday"
    return ""


def count_tasks(client_state: Mapping) -> TaskCounts:
    """Count the tasks listed under ``result`` in a client state.

    A task is done when it is ready to report, running when its active task
    state is 1, and waiting when it has no active task and is not done.
    """
    results = list(client_state.get("result", ()))
    counts = TaskCounts(all=len(results))
    for result in results:
        ready = "ready_to_report" in result
        if ready:
            counts.done += 1
        active_task = result.get("active_task")
        if active_task is not None:
            counts.active += 1
            if int(active_task["active_task_state"]) == 1:
                counts.run += 1
        elif not ready:
            counts.queue += 1
    counts.other = counts.all - counts.run - counts.done - counts.queue
    return counts


def disk_usage(summary: Mapping) -> DiskUsage:
    """Disk figures from a disk usage summary; project usage adds to the client's."""
    usage = DiskUsage(
        total=float(summary["d_total"]),
        free=float(summary["d_free"]),
        boinc=float(summary["d_boinc"]),
        allowed=float(summary["d_allowed"]),
    )
    for project in summary.get("project", ()):
        usage.boinc += float(project["disk_usage"])
    return usage


def project_status(project: Optional[Mapping]) -> str:
    """Status marks for a project: suspended and/or no new tasks."""
    if project is None:
        return ""
    status = ""
    if "suspended_via_gui" in project:
        status += SUSPENDED_MARK
    if "dont_request_more_work" in project:
        status += NO_NEW_TASKS_MARK
    return status


def _credit(day: Mapping, name: str) -> float:
    return float(day[name])


def summarize_statistics(
    statistics: Iterable[Mapping],
    project_names: Optional[Mapping[str, str]] = None,
    project_states: Optional[Mapping[str, Mapping]] = None,
    last_stat_time: float = 0,
) -> StatisticsSummary:
    """Build credit totals from per-project daily statistics.

    ``statistics`` holds one mapping per project with ``master_url`` and a
    ``daily_statistics`` list. ``project_names`` maps master URLs to names,
    ``project_states`` maps names to project state for the status marks.
    The daily change is taken over the projects that have a record for
    ``last_stat_time``. Projects come back newest first.
    """
    names = project_names or {}
    states = project_states
    summary = StatisticsSummary(last_stat_time=last_stat_time)
    user_last = host_last = user_pred = host_pred = 0.0

    for project in statistics:
        url = str(project["master_url"])
        stat = ProjectStat(name=names.get(url, url))
        if states is not None:
            stat.status = project_status(states.get(stat.name))
        days = sorted(
            project.get("daily_statistics", ()),
            key=lambda entry: float(entry["day"]),
            reverse=True,
        )
        if days:
            last_day = find_day(days, last_stat_time)
            if last_day is not None:
                user_last += _credit(last_day, "user_total_credit")
                host_last += _credit(last_day, "host_total_credit")
                if len(days) > 1:
                    user_pred += _credit(days[1], "user_total_credit")
                    host_pred += _credit(days[1], "host_total_credit")
            front = days[0]
            if len(days) > 1:
                stat.user_last_day = (
                    _credit(front, "user_total_credit") - _credit(days[1], "user_total_credit")
                )
                stat.host_last_day = (
                    _credit(front, "host_total_credit") - _credit(days[1], "host_total_credit")
                )
            stat.last_stat_time = float(front["day"])
            stat.user = _credit(front, "user_total_credit")
            stat.host = _credit(front, "host_total_credit")
            summary.user_total += stat.user
            summary.user_avg += _credit(front, "user_expavg_credit")
            summary.host_total += stat.host
            summary.host_avg += _credit(front, "host_expavg_credit")
        summary.projects.append(stat)

    summary.last_day_user = user_last - user_pred
    summary.last_day_host = host_last - host_pred
    summary.projects.sort(key=ProjectStat.sort_key, reverse=True)
    return summary