"""Why the provider started the tests: a normal run or a re-run."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class RunMode(Enum):
    NORMAL_RUN = "normal-run"
    RERUN = "re-run"

    @property
    def run_name(self) -> str:
        return self.value

    @classmethod
    def from_run_name(cls, run_name: str) -> RunMode | None:
        return MODES.get(run_name)


# Built once at import, read-only afterwards.
MODES: MappingProxyType[str, RunMode] = MappingProxyType(
    {mode.run_name: mode for mode in RunMode}
)
