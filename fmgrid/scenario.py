"""Reading and writing benchmark scenario files (versions 0 and 1)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

NO_SCALING = -1

_FIELDS_V0 = ("bucket", "map", "sx", "sy", "gx", "gy", "dist")
_FIELDS_V1 = ("bucket", "map", "size_x", "size_y", "sx", "sy", "gx", "gy", "dist")


@dataclass(frozen=True)
class Experiment:
    """One start/goal query with its reference distance."""

    start_x: int
    start_y: int
    goal_x: int
    goal_y: int
    bucket: int
    distance: float
    map_name: str
    scale_x: int = NO_SCALING
    scale_y: int = NO_SCALING


def _convert(field: str, token: str) -> int | float | str:
    if field == "map":
        return token
    if field == "dist":
        return float(token)
    return int(token)


def _parse_records(tokens: list[str], fields: tuple[str, ...]) -> Iterator[dict]:
    """Yield complete records; stop at the first short or malformed one."""
    size = len(fields)
    for offset in range(0, len(tokens), size):
        chunk = tokens[offset:offset + size]
        if len(chunk) < size:
            return
        try:
            yield {f: _convert(f, t) for f, t in zip(fields, chunk)}
        except ValueError:
            return


class ScenarioLoader:
    """Loads and stores the experiments of a scenario file."""

    def __init__(self, path: str | PathLike | None = None) -> None:
        self.experiments: list[Experiment] = []
        self.scenario_name = "" if path is None else str(path)
        if path is not None:
            self._load(Path(path))

    def _load(self, path: Path) -> None:
        tokens = path.read_text().split()
        version = 0.0
        if tokens and tokens[0] == "version":
            try:
                version = float(tokens[1])
            except (IndexError, ValueError) as exc:
                raise ValueError("Invalid version number.") from exc
            tokens = tokens[2:]
        if version == 0.0:
            for rec in _parse_records(tokens, _FIELDS_V0):
                self.experiments.append(
                    Experiment(rec["sx"], rec["sy"], rec["gx"], rec["gy"],
                               rec["bucket"], rec["dist"], rec["map"])
                )
        elif version == 1.0:
            for rec in _parse_records(tokens, _FIELDS_V1):
                self.experiments.append(
                    Experiment(rec["sx"], rec["sy"], rec["gx"], rec["gy"],
                               rec["bucket"], rec["dist"], rec["map"],
                               rec["size_x"], rec["size_y"])
                )
        else:
            raise ValueError("Invalid version number.")

    def save(self, path: str | PathLike) -> None:
        """Write the experiments as a version 1 scenario file."""
        lines = ["version 1"]
        for exp in self.experiments:
            fields = (
                exp.bucket, exp.map_name, exp.scale_x, exp.scale_y,
                exp.start_x, exp.start_y, exp.goal_x, exp.goal_y,
                f"{exp.distance:.6g}",
            )
            lines.append("\t".join(str(f) for f in fields))
        Path(path).write_text("\n".join(lines) + "\n")

    def add_experiment(self, experiment: Experiment) -> None:
        """Append an experiment."""
        self.experiments.append(experiment)

    def __len__(self) -> int:
        return len(self.experiments)

    def __getitem__(self, index: int) -> Experiment:
        return self.experiments[index]

    def __iter__(self) -> Iterator[Experiment]:
        return iter(self.experiments)