"""Configuration loader for Herotype."""

from __future__ import annotations

import os
import tempfile
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Self

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from herotype.engine.errors import ConfigError
from herotype.paths import ensure_directories, get_config_path

DEFAULT_PHRASES: tuple[str, ...] = (
    "Crafting interfaces that speak .",
    "UX with purpose. UI with personality .",
    "Design logic with aspirant fluency .",
    "Intelligence in design. Excellence in delivery .",
    "Engaging interfaces, crafted .",
    "Pixel-perfect precision .",
    "Code, art, combined .",
    "Interactive by design .",
    "Your vision, our build .",
)

DEFAULT_SCRAMBLE_SYMBOLS = "!<>-_/:~;[]{}—=+*^?#________"


def atomic_write(path: Path, content: str) -> None:
    """Write file atomically to avoid partial/corrupt writes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        Path(tmp_path).replace(path)
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class _Section(BaseModel):
    """Config section accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    @classmethod
    def coerce(cls, value: Self | Mapping[str, Any] | None) -> Self:
        """Build a section from an instance, a mapping or None.

        Raises:
            ConfigError: If the mapping holds unknown keys or invalid values.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            raise ConfigError(
                f"Invalid {cls.__name__}: {_format_validation_error(exc)}"
            ) from exc


class TypewriterConfig(_Section):
    """Timing of the typing/deleting cycle (milliseconds)."""

    typing_speed_ms: float = Field(default=90, gt=0, description="Delay between typed characters")
    deleting_speed_ms: float = Field(
        default=40, gt=0, description="Delay between deleted characters"
    )
    hold_full_ms: float = Field(
        default=8000, ge=0, description="Pause after a phrase is fully typed"
    )
    initial_delay_ms: float = Field(default=100, ge=0, description="Delay before the first step")
    long_phrase_length_threshold: int = Field(
        default=25, ge=0, description="Phrases longer than this use the speed multiplier"
    )
    long_phrase_speed_multiplier: float = Field(
        default=0.8, gt=0, description="Applied to typing and deleting speeds for long phrases"
    )


class ResponsiveConfig(_Section):
    """Viewport breakpoint and the styles either side of it."""

    breakpoint: float = Field(default=768, gt=0, description="Mobile below, desktop at or above")
    debounce_ms: float = Field(default=250, ge=0, description="Resize burst debounce window")
    desktop_font_size: str = Field(default="2.2em")
    mobile_font_size: str = Field(default="1.8em")
    cell_width: int = Field(
        default=8, gt=0, description="Width units per terminal column"
    )


class ScrambleConfig(_Section):
    """Scramble headline effect."""

    symbols: str = Field(default=DEFAULT_SCRAMBLE_SYMBOLS, min_length=1)
    change_probability: float = Field(
        default=0.28, ge=0, le=1, description="Chance a scrambling cell picks a new symbol"
    )
    max_start_frame: int = Field(default=20, gt=0)
    max_duration_frames: int = Field(default=20, gt=0)
    frame_interval_ms: float = Field(default=16, gt=0, description="One display frame")


class HeroConfig(_Section):
    """Content of the hero screen."""

    phrases: list[str] = Field(default_factory=lambda: list(DEFAULT_PHRASES), min_length=1)
    headline: str = Field(default="Designing motion for the terminal")
    tagline: str = Field(default="Typewriter and scramble effects, one timer at a time.")
    reveal_delay_ms: float = Field(
        default=1500, ge=0, description="Delay before the tagline is revealed"
    )


class HerotypeConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    typewriter: TypewriterConfig = Field(default_factory=TypewriterConfig)
    responsive: ResponsiveConfig = Field(default_factory=ResponsiveConfig)
    scramble: ScrambleConfig = Field(default_factory=ScrambleConfig)
    hero: HeroConfig = Field(default_factory=HeroConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> HerotypeConfig:
        """Load configuration from TOML file or use defaults.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        if config_path is None:
            ensure_directories()
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{config_path}: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"{config_path}: {_format_validation_error(exc)}") from exc

    def to_toml(self) -> str:
        """Serialize current config to a TOML document."""
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Herotype configuration"))
        for section_name in ("typewriter", "responsive", "scramble", "hero"):
            section: BaseModel = getattr(self, section_name)
            table = tomlkit.table()
            for key, value in section.model_dump().items():
                if value is not None:
                    table[key] = value
            doc[section_name] = table
        return tomlkit.dumps(doc)

    def save(self, path: Path) -> None:
        """Write the config to ``path`` (created if missing)."""
        atomic_write(path, self.to_toml())
