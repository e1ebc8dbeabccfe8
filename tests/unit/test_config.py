"""Unit tests for configuration loading and validation."""

from __future__ import annotations

import tomllib

import pytest

from herotype.config import (
    DEFAULT_PHRASES,
    HeroConfig,
    HerotypeConfig,
    ResponsiveConfig,
    ScrambleConfig,
    TypewriterConfig,
)
from herotype.engine.errors import ConfigError, HerotypeError
from herotype.paths import get_config_path
from tests.helpers import write_test_config

pytestmark = pytest.mark.unit


class TestDefaults:
    def test_typewriter_defaults(self):
        config = TypewriterConfig()
        assert config.typing_speed_ms == 90
        assert config.deleting_speed_ms == 40
        assert config.hold_full_ms == 8000
        assert config.initial_delay_ms == 100
        assert config.long_phrase_length_threshold == 25
        assert config.long_phrase_speed_multiplier == 0.8

    def test_responsive_defaults(self):
        config = ResponsiveConfig()
        assert config.breakpoint == 768
        assert config.debounce_ms == 250

    def test_scramble_defaults(self):
        config = ScrambleConfig()
        assert config.change_probability == 0.28
        assert config.max_start_frame == 20
        assert config.max_duration_frames == 20

    def test_hero_phrases(self):
        assert HeroConfig().phrases == list(DEFAULT_PHRASES)
        assert len(DEFAULT_PHRASES) == 9


class TestCoerce:
    def test_none_gives_defaults(self):
        assert TypewriterConfig.coerce(None) == TypewriterConfig()

    def test_instance_passes_through(self):
        config = TypewriterConfig(typing_speed_ms=50)
        assert TypewriterConfig.coerce(config) is config

    def test_camel_and_snake_keys(self):
        camel = TypewriterConfig.coerce({"typingSpeedMs": 60, "holdFullMs": 1000})
        snake = TypewriterConfig.coerce({"typing_speed_ms": 60, "hold_full_ms": 1000})
        assert camel == snake

    @pytest.mark.parametrize(
        "options",
        [
            {"typingSpeedMs": 0},
            {"deletingSpeedMs": -5},
            {"holdFullMs": -1},
            {"longPhraseSpeedMultiplier": 0},
            {"typingSpeedMs": "fast"},
            {"unknownOption": 1},
        ],
    )
    def test_invalid_options_raise_config_error(self, options):
        with pytest.raises(ConfigError):
            TypewriterConfig.coerce(options)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ScrambleConfig.coerce({"changeProbability": 2})
        assert issubclass(ConfigError, HerotypeError)

    def test_empty_phrase_list_rejected(self):
        with pytest.raises(ConfigError):
            HeroConfig.coerce({"phrases": []})


class TestLoad:
    def test_missing_file_gives_defaults(self, config_path):
        assert HerotypeConfig.load(config_path) == HerotypeConfig()

    def test_default_path_used(self):
        config = HerotypeConfig.load()
        assert isinstance(config, HerotypeConfig)
        assert get_config_path().parent.exists()

    def test_loads_sections(self, config_path):
        write_test_config(config_path, phrases=["one", "two"], typing_speed_ms=50)

        config = HerotypeConfig.load(config_path)

        assert config.hero.phrases == ["one", "two"]
        assert config.typewriter.typing_speed_ms == 50
        assert config.typewriter.deleting_speed_ms == 40

    def test_camel_case_keys_in_file(self, config_path):
        config_path.write_text("[typewriter]\nholdFullMs = 1500\n", encoding="utf-8")
        assert HerotypeConfig.load(config_path).typewriter.hold_full_ms == 1500

    def test_malformed_toml(self, config_path):
        config_path.write_text("[typewriter\n", encoding="utf-8")
        with pytest.raises(ConfigError, match=str(config_path.name)):
            HerotypeConfig.load(config_path)

    def test_invalid_value(self, config_path):
        write_test_config(config_path, typing_speed_ms=-1)
        with pytest.raises(ConfigError, match="typing_speed_ms|typingSpeedMs"):
            HerotypeConfig.load(config_path)

    def test_unknown_section(self, config_path):
        config_path.write_text("[typewritter]\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            HerotypeConfig.load(config_path)


class TestSave:
    def test_round_trip(self, config_path):
        original = HerotypeConfig(
            typewriter=TypewriterConfig(hold_full_ms=2000),
            hero=HeroConfig(phrases=["alpha", "beta"]),
        )

        original.save(config_path)

        assert HerotypeConfig.load(config_path) == original

    def test_toml_is_valid_and_commented(self):
        text = HerotypeConfig().to_toml()
        assert text.startswith("# Herotype configuration")
        data = tomllib.loads(text)
        assert set(data) == {"typewriter", "responsive", "scramble", "hero"}
