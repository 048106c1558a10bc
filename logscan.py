#!/usr/bin/env python3
# Regex scanning of logcat style log files

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Iterable, Tuple, Union
import logging
import re

logger = logging.getLogger(__name__)

"""
lines look like

    10-15 10:18:51.123  1234  1240 E ActivityManager: message

optionally with a two digit year in front of the date. the fields after the
timestamp are the process id, the thread id, the level and the tag.
"""
_PREFIX = r"(?:\d{2}-)?\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\s+(?P<pid>\d+)\s+(?P<tid>\d+)\s+"

def _line(level : str = "[VDIWEFA]", tag : str = r"[^:]+", message : str = r".*") -> re.Pattern:
    return re.compile(_PREFIX + "(?P<level>" + level + r") (?P<tag>" + tag + r"): (?P<message>" + message + ")")

PATTERNS : Dict[str, re.Pattern] = {
    "any_line": re.compile(_PREFIX + "(?P<level>[VDIWEFA])"),
    "error": _line(level="E"),
    "debug": _line(level="D"),
    "warning_package_manager": _line(level="W", tag="PackageManager"),
    "java_source": _line(level="[EW]", tag=r"[^:]+\.java"),
    "thread": _line(message=r".*Thread.*"),
    "low_memory_killer": re.compile(r"[VDIWEFA].*lowmemorykiller"),
}

class ErrorTally(object):
    """
    error counts per process id. the caller owns it and can keep passing the
    same tally to scan_lines to aggregate over several files
    """
    def __init__(self):
        self.counts = Counter()
        self.main_thread_errors = 0

    def record(self, pid : str, tid : str = None) -> None:
        self.counts[pid] += 1
        # the main thread of a process has tid == pid
        if tid == pid : self.main_thread_errors += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def most_errors(self) -> Union[Tuple[str, int], None]:
        """ (pid, count) of the process with the most errors, smallest pid on ties """
        if not self.counts : return None
        return min(self.counts.items(), key=lambda item: (-item[1], int(item[0])))

@dataclass
class ScanResult:
    matches : Dict[str, int]
    errors : List[str] = field(default_factory=list)
    tally : ErrorTally = field(default_factory=ErrorTally)

def scan_lines(lines : Iterable[str], tally : ErrorTally = None) -> ScanResult:
    """ counts the lines matching each of PATTERNS and records every error line in tally """
    if tally is None : tally = ErrorTally()
    result = ScanResult(matches={name: 0 for name in PATTERNS}, tally=tally)

    for line in lines:
        line = line.rstrip("\n")
        for name, pattern in PATTERNS.items():
            if pattern.search(line) : result.matches[name] += 1

        error = PATTERNS["error"].search(line)
        if error:
            result.errors.append(line)
            tally.record(error.group("pid"), error.group("tid"))

    logger.debug("scanned %d error lines", len(result.errors))
    return result

def scan_file(path : str, tally : ErrorTally = None) -> ScanResult:
    with open(path, 'r') as file:
        return scan_lines(file, tally)

def format_report(result : ScanResult) -> str:
    lines = [f"{name}: {count}" for name, count in result.matches.items()]

    lines.append("Errors:")
    lines.extend("  " + error for error in result.errors)

    lines.append("Distinct process ids: " + ", ".join(sorted(result.tally.counts, key=int)))
    most = result.tally.most_errors()
    if most is not None:
        lines.append(f"Process with the most errors: {most[0]} ({most[1]} errors)")
    lines.append(f"Errors on main threads: {result.tally.main_thread_errors}")

    return "\n".join(lines)
