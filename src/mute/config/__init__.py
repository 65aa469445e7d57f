"""
Pydantic configuration schemas for mute loggers.

A logger is described as an ordered list of routes. Memory sinks are
referred to by name and resolved against a caller-owned dict when the
logger is built, so the caller can inspect them afterwards.

Usage:
    config = LoggerConfig.from_yaml("logging.yaml")
    sinks: dict[str, list[str]] = {}
    log = config.build(sinks)
    log.send(Event("hello"))
    sinks["audit"]  # ["hello"]

Example YAML:
    routes:
      - name: console
        memory: audit
        format: text
      - memory: machine
        format: json
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from mute.core import Logger
from mute.routing import Route


class RouteConfig(BaseModel):
    # Validated at delivery, not here, same as Route itself
    format: str
    memory: Optional[str] = None    # sink name
    file: str = ""                  # not implemented
    name: Optional[str] = None

    def build(self, sinks: dict[str, list[str]]) -> Route:
        memory = None
        if self.memory is not None:
            memory = sinks.setdefault(self.memory, [])
        return Route(format=self.format, memory=memory, file=self.file, name=self.name)


class LoggerConfig(BaseModel):
    routes: list[RouteConfig] = Field(default_factory=list)

    def build(self, sinks: dict[str, list[str]] | None = None) -> Logger:
        """
        Build a Logger with routes in config order.

        Sinks missing from `sinks` are created empty and inserted into it.
        Routes naming the same sink share the same list.
        """
        if sinks is None:
            sinks = {}
        return Logger(*(route.build(sinks) for route in self.routes))

    @property
    def sink_names(self) -> list[str]:
        """Distinct memory sink names, in first-use order."""
        names: list[str] = []
        for route in self.routes:
            if route.memory is not None and route.memory not in names:
                names.append(route.memory)
        return names

    @classmethod
    def from_yaml(cls, path: str | Path) -> LoggerConfig:
        """Load and validate from a YAML file."""
        path = Path(path)
        return cls.from_yaml_string(path.read_text(encoding="utf-8"))

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> LoggerConfig:
        """Load and validate from a YAML string. An empty document is an empty config."""
        data = yaml.safe_load(yaml_string) or {}
        return cls.model_validate(data)

    @classmethod
    def from_dict(cls, data: dict) -> LoggerConfig:
        return cls.model_validate(data)

    def to_dict(self, exclude_none: bool = True) -> dict:
        return self.model_dump(exclude_none=exclude_none)


__all__ = ["LoggerConfig", "RouteConfig"]
