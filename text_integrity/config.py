"""
Configuration loader for the text integrity engine.

Loads settings from a YAML config file with sensible defaults.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from .error_handler import ConfigError
from .validator import validate_positive_int

logger = logging.getLogger(__name__)


@dataclass
class ProfanityConfig:
    """Configuration for profanity detection and masking."""
    mask_char: str = "*"
    max_separator_run: int = 3  # separators tolerated between two letters
    custom_roots_path: str = ""  # one root per line, optional "tagalog:" prefix
    custom_whitelist_path: str = ""  # one safe word or phrase per line


@dataclass
class SpellingConfig:
    """Configuration for the spelling checker."""
    suggestion_distance: int = 2  # largest edit distance reported as a typo


@dataclass
class GrammarConfig:
    """Configuration for the grammar rule engine."""
    long_sentence_chars: int = 200
    filipino_rules: bool = True


@dataclass
class ScoringConfig:
    """Configuration for the quality score."""
    penalty_per_point: int = 5
    weights: Dict[str, int] = field(default_factory=lambda: {
        "error": 3,
        "warning": 2,
        "suggestion": 1,
    })


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: str = ""


@dataclass
class IntegrityConfig:
    """Main configuration container."""
    profanity: ProfanityConfig = field(default_factory=ProfanityConfig)
    spelling: SpellingConfig = field(default_factory=SpellingConfig)
    grammar: GrammarConfig = field(default_factory=GrammarConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "IntegrityConfig":
        """
        Load configuration from YAML file.

        If no path is provided, uses default values.
        Missing keys in the config file will use defaults; unknown keys
        are ignored.

        Raises:
            ConfigError: If the file is not valid YAML or holds invalid values
        """
        config = cls()

        if config_path and Path(config_path).exists():
            config_path = Path(config_path)
            logger.info(f"Loading configuration from {config_path}")
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(
                    f"Settings file {config_path} is not valid YAML",
                    str(e)
                ) from e

            if not isinstance(data, dict):
                raise ConfigError(f"Settings file {config_path} must contain a mapping of sections")

            for section in ('profanity', 'spelling', 'grammar', 'scoring', 'logging'):
                values = data.get(section)
                if not values:
                    continue
                if not isinstance(values, dict):
                    raise ConfigError(f"Section '{section}' in {config_path} must be a mapping")
                target = getattr(config, section)
                for key, value in values.items():
                    if hasattr(target, key):
                        setattr(target, key, value)
                    else:
                        logger.debug(f"Ignoring unknown setting {section}.{key}")

        config.validate()
        return config

    def validate(self) -> None:
        """
        Check values that the engine cannot work around.

        Raises:
            ConfigError: On the first invalid value
        """
        validate_positive_int(self.profanity.max_separator_run, "profanity.max_separator_run")
        validate_positive_int(self.grammar.long_sentence_chars, "grammar.long_sentence_chars")
        validate_positive_int(self.scoring.penalty_per_point, "scoring.penalty_per_point")
        if isinstance(self.spelling.suggestion_distance, bool) or \
                not isinstance(self.spelling.suggestion_distance, int) or \
                self.spelling.suggestion_distance < 0:
            raise ConfigError(
                f"'spelling.suggestion_distance' must be a non-negative integer, "
                f"got {self.spelling.suggestion_distance!r}"
            )
        if not isinstance(self.scoring.weights, dict):
            raise ConfigError("'scoring.weights' must be a mapping of severity to weight")
        for severity in ("error", "warning", "suggestion"):
            if severity in self.scoring.weights:
                validate_positive_int(self.scoring.weights[severity], f"scoring.weights.{severity}")

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        data = asdict(self)
        logger.info(f"Saving configuration to {config_path}")

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False)
