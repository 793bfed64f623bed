"""Current wall-clock time tool."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional
from zoneinfo import ZoneInfo

from ..registry import Clock, ToolContext
from . import register_tool

DEFAULT_FORMAT = "24h"
PREFIX = "現在の時刻: "

HourCycle = Literal[12, 24]

_DAY_PERIODS = {"AM": "午前", "PM": "午後"}


@dataclass(frozen=True)
class GetTimeArguments:
    format: Optional[str] = None


def format_local_time(now: datetime, hour_cycle: HourCycle) -> str:
    """Render ``now`` as hour:minute:second using Japanese conventions.

    ``hour_cycle=24`` yields ``HH:MM:SS`` (00-23). ``hour_cycle=12`` yields
    ``hh:MM:SS`` (01-12) followed by 午前 or 午後.
    """

    if hour_cycle == 12:
        period = _DAY_PERIODS["AM" if now.hour < 12 else "PM"]
        return f"{now:%I:%M:%S} {period}"
    return f"{now:%H:%M:%S}"


def system_clock(timezone: Optional[str] = None) -> Clock:
    """Return a clock reading real time in ``timezone`` (local time when unset)."""

    if timezone is None:
        return datetime.now
    zone = ZoneInfo(timezone)
    return lambda: datetime.now(zone)


@register_tool("get_time", arguments=GetTimeArguments)
def get_time(arguments: GetTimeArguments, context: ToolContext) -> str:
    time_format = arguments.format or DEFAULT_FORMAT
    hour_cycle: HourCycle = 12 if time_format == "12h" else 24
    return PREFIX + format_local_time(context.clock(), hour_cycle)


__all__ = [
    "DEFAULT_FORMAT",
    "GetTimeArguments",
    "PREFIX",
    "format_local_time",
    "get_time",
    "system_clock",
]
