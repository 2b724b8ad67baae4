"""
Scoring configuration.

ScoringConfig holds the category weights and the neutral scores used when a
job description states no requirement for a category. The defaults are the
documented scoring constants; a YAML file can override any subset of them.

Example scoring.yaml:
    skills_weight: 0.5
    experience_weight: 0.2
    keywords_weight: 0.2
    education_weight: 0.1
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from atsmatch.contexts.scoring.exceptions import ScoringConfigError

load_dotenv()

WEIGHT_FIELDS = ("skills_weight", "experience_weight", "keywords_weight", "education_weight")
DEFAULT_SCORE_FIELDS = (
    "default_skills_score",
    "default_experience_score",
    "default_education_score",
)


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and neutral defaults for category and overall scoring."""

    skills_weight: float = 0.4
    experience_weight: float = 0.3
    keywords_weight: float = 0.2
    education_weight: float = 0.1

    # Neutral scores when the job description states no requirement
    default_skills_score: int = 85
    default_experience_score: int = 85
    default_education_score: int = 90

    # Points per matched important keyword (capped at 100)
    keyword_points: int = 10

    # Keyword density: top-N job description tokens of at least this length
    density_top_n: int = 10
    density_min_token_length: int = 4


DEFAULT_SCORING_CONFIG = ScoringConfig()


def validate_scoring_config(config: ScoringConfig) -> ScoringConfig:
    """
    Check that weights are non-negative and sum to 1, and that every setting
    keeps category scores within [0, 100].

    Raises:
        ScoringConfigError: Naming the offending fields
    """
    weights = {name: getattr(config, name) for name in WEIGHT_FIELDS}

    negative = [name for name, value in weights.items() if value < 0]
    if negative:
        raise ScoringConfigError("Weights must be non-negative", fields=negative)

    total = sum(weights.values())
    if not math.isclose(total, 1.0, abs_tol=1e-6):
        raise ScoringConfigError(
            f"Weights must sum to 1.0 (got {total:.4f})", fields=list(WEIGHT_FIELDS)
        )

    out_of_range = [
        name for name in DEFAULT_SCORE_FIELDS if not 0 <= getattr(config, name) <= 100
    ]
    if out_of_range:
        raise ScoringConfigError("Default scores must be between 0 and 100", fields=out_of_range)

    if config.keyword_points < 0:
        raise ScoringConfigError("Keyword points must be non-negative", fields=["keyword_points"])

    if config.density_top_n < 0 or config.density_min_token_length < 0:
        raise ScoringConfigError(
            "Keyword density settings must be non-negative",
            fields=["density_top_n", "density_min_token_length"],
        )

    return config


def load_scoring_config(config_path: Optional[Union[str, Path]] = None) -> ScoringConfig:
    """
    Load scoring configuration from YAML, merged over the defaults.

    Args:
        config_path: Optional path to a YAML file (defaults to the SCORING_CONFIG_PATH
            environment variable; when that is unset too, the defaults are returned)

    Returns:
        Validated ScoringConfig

    Raises:
        ScoringConfigError: If the file is missing, is not valid YAML, has unknown
            keys or wrong value types, or the resulting settings are invalid
    """
    if config_path is None:
        config_path = os.getenv("SCORING_CONFIG_PATH")
    if not config_path:
        return DEFAULT_SCORING_CONFIG

    config_path = Path(config_path)
    if not config_path.is_file():
        raise ScoringConfigError(f"Scoring config not found: {config_path}")

    schema = OmegaConf.structured(ScoringConfig)
    # Frozen dataclasses yield read-only configs; the merge needs a writable base
    OmegaConf.set_readonly(schema, False)
    try:
        overrides = OmegaConf.load(config_path)
        merged = OmegaConf.merge(schema, overrides)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise ScoringConfigError(f"Invalid scoring config {config_path}: {e}") from e

    config = ScoringConfig(**OmegaConf.to_container(merged, resolve=True))
    return validate_scoring_config(config)
