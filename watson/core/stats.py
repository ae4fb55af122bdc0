"""Build statistics for the Bowyer-Watson engine and their presentation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class BuildStats:
    insertions: int = 0
    bad_triangles: int = 0
    triangles_created: int = 0
    triangles_completed: int = 0
    edges_cancelled: int = 0
    reopened: int = 0
    cut_removed: int = 0
    # Timing (seconds)
    time_total: float = 0.0
    time_max: float = 0.0
    time_min: float = 0.0  # 0 means uninitialized

    def record_time(self, dt: float) -> None:
        self.time_total += dt
        if dt > self.time_max:
            self.time_max = dt
        if self.time_min == 0.0 or dt < self.time_min:
            self.time_min = dt

    def reset(self) -> None:
        for name in self.__dataclass_fields__:
            setattr(self, name, type(getattr(self, name))())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'insertions': self.insertions,
            'bad_triangles': self.bad_triangles,
            'triangles_created': self.triangles_created,
            'triangles_completed': self.triangles_completed,
            'edges_cancelled': self.edges_cancelled,
            'reopened': self.reopened,
            'cut_removed': self.cut_removed,
            'bad_per_insert': (self.bad_triangles / self.insertions) if self.insertions else 0.0,
            'time_total': self.time_total,
            'time_max': self.time_max,
            'time_min': self.time_min,
            'time_avg': (self.time_total / self.insertions) if self.insertions else 0.0,
        }


def format_stats_table(stats_dict: Dict[str, Any]) -> str:
    """Return a human readable two-column table of a ``to_dict()`` payload."""
    if not stats_dict:
        return "<no stats>"
    width = max(len(k) for k in stats_dict)
    lines = []
    for key, val in stats_dict.items():
        if key.startswith('time_'):
            lines.append(f"{key.ljust(width)}  {val * 1000.0:10.3f} ms")
        elif isinstance(val, float):
            lines.append(f"{key.ljust(width)}  {val:10.3f}")
        else:
            lines.append(f"{key.ljust(width)}  {val:10d}")
    return "\n".join(lines)


__all__ = ['BuildStats', 'format_stats_table']
