"""
Build configuration models — the synthesis contract.

A ``Profile`` is one row of the ecosystem rule table.  A
``BuildConfiguration`` is what the synthesizer produces for a single run
and what both renderers consume.  Neither is mutated after construction:
``environment`` is stored as a read-only copy of the mapping passed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Ecosystem(StrEnum):
    """Project ecosystems the synthesizer knows how to containerize."""

    NODEJS = "nodejs"
    PYTHON = "python"
    GO = "go"
    JAVA_MAVEN = "java-maven"
    JAVA_GRADLE = "java-gradle"
    RUBY = "ruby"
    PHP = "php"
    GENERIC = "generic"


def _freeze(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


class Profile(BaseModel):
    """Fixed template for one ecosystem.

    Attributes:
        ecosystem:    Which ecosystem this profile serves.
        base_image:   Image reference for the ``FROM`` line.
        instructions: Ordered Dockerfile instructions after ``FROM``.
        ports:        Default ``host:container`` port mappings.
        environment:  Profile-level variables seeded into the build.
    """

    model_config = ConfigDict(frozen=True)

    ecosystem: Ecosystem
    base_image: str
    instructions: tuple[str, ...] = ()
    ports: tuple[str, ...] = ()
    environment: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("environment")
    @classmethod
    def freeze_environment(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return _freeze(value)

    @field_serializer("environment")
    def dump_environment(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


class BuildConfiguration(BaseModel):
    """Synthesis result consumed by exactly one renderer.

    Attributes:
        ecosystem:    Selected ecosystem.
        base_image:   Image reference for the ``FROM`` line.
        instructions: Ordered build/runtime instructions.
        ports:        ``host:container`` port mappings.
        environment:  Merged environment variables (read-only).
        compose:      True when docker-compose output was requested.
        secrets_file: Env file referenced by compose secret entries.
    """

    model_config = ConfigDict(frozen=True)

    ecosystem: Ecosystem
    base_image: str
    instructions: tuple[str, ...] = ()
    ports: tuple[str, ...] = ()
    environment: Mapping[str, str] = Field(default_factory=dict)
    compose: bool = False
    secrets_file: str = ".env"

    @field_validator("environment")
    @classmethod
    def freeze_environment(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return _freeze(value)

    @field_serializer("environment")
    def dump_environment(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)
