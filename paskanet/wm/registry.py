"""
Panel registry: tool display name -> tool spec (kind, window title, size policy).

The registry is partial on purpose: the Tools menu advertises more names than
there are panels, and every unknown name resolves to ToolNotFound.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ToolKind(str, Enum):
    COMMAND_PROMPT = "Command Prompt"
    SERVER_MANAGER = "Server Manager"
    PERFORMANCE_MONITOR = "Performance Monitor"
    RESOURCE_MONITOR = "Resource Monitor"
    SERVICES = "Services"
    EVENT_VIEWER = "Event Viewer"
    DISK_CLEANUP = "Disk Cleanup"
    OPTIMIZE_DRIVES = "Defragment and Optimize Drives"


class SizePolicy(str, Enum):
    DEFAULT = "default"
    NEAR_FULLSCREEN = "near_fullscreen"


@dataclass(frozen=True, slots=True)
class ToolSpec:
    kind: ToolKind
    title: str
    size_policy: SizePolicy = SizePolicy.DEFAULT

    @property
    def name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class ToolNotFound:
    """Explicit "unsupported tool" result; callers show a notice, never crash."""

    tool_name: str


DEFAULT_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(ToolKind.COMMAND_PROMPT, "Paskanet II Command Prompt"),
    ToolSpec(ToolKind.SERVER_MANAGER, "Server Manager", SizePolicy.NEAR_FULLSCREEN),
    ToolSpec(ToolKind.PERFORMANCE_MONITOR, "Performance Monitor"),
    ToolSpec(ToolKind.RESOURCE_MONITOR, "Resource Monitor"),
    ToolSpec(ToolKind.SERVICES, "Services"),
    ToolSpec(ToolKind.EVENT_VIEWER, "Event Viewer"),
    ToolSpec(ToolKind.DISK_CLEANUP, "Disk Cleanup (C:)"),
    ToolSpec(ToolKind.OPTIMIZE_DRIVES, "Optimize Drives"),
)


class PanelRegistry:
    """Immutable name -> ToolSpec lookup, built once per shell."""

    def __init__(self, specs: Iterable[ToolSpec] = DEFAULT_TOOLS) -> None:
        self._by_name = MappingProxyType({spec.name: spec for spec in specs})

    def resolve(self, tool_name: str) -> ToolSpec | ToolNotFound:
        spec = self._by_name.get(tool_name)
        if spec is None:
            return ToolNotFound(tool_name)
        return spec

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._by_name

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
