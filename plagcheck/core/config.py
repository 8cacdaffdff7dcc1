"""
Runtime settings, read from the environment (and a local ``.env`` file).

All variables use the ``PLAGCHECK_`` prefix, e.g. ``PLAGCHECK_WEIGHT_COSINE``
or ``PLAGCHECK_BACKEND``. Defaults reproduce the fixed 0.5/0.3/0.2 policy.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .language_detector import DEFAULT_MIXED_THRESHOLD
from .sequence_similarity import BACKENDS
from .validation import ParameterValidationError, ParameterValidator

ENV_PREFIX = "PLAGCHECK_"
LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')
_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}
DEFAULT_MAX_TEXT_LENGTH = 20000


@dataclass(frozen=True)
class Settings:
    weight_cosine: float = 0.5
    weight_edit: float = 0.3
    weight_character: float = 0.2
    backend: str = 'python'
    log_level: str = 'WARNING'
    log_dir: str = 'logs'
    log_to_file: bool = False
    structured_logs: bool = False
    # Longer documents are scored but logged as expensive (O(L^2) tables)
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    mixed_threshold: float = DEFAULT_MIXED_THRESHOLD


def _parse_bool(value: str, field: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ParameterValidationError(f"{field} must be a boolean, got {value!r}", field=field, value=value)


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> Settings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read instead of ``os.environ``
        dotenv: Whether to load a ``.env`` file first (ignored when ``env``
            is given)

    Returns:
        Validated Settings

    Raises:
        ParameterValidationError: If a variable holds an invalid value
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    defaults = Settings()

    def get(name: str) -> Optional[str]:
        value = env.get(ENV_PREFIX + name)
        return value if value not in (None, '') else None

    values = {}

    for attr, name in (('weight_cosine', 'WEIGHT_COSINE'),
                       ('weight_edit', 'WEIGHT_EDIT'),
                       ('weight_character', 'WEIGHT_CHARACTER'),
                       ('mixed_threshold', 'MIXED_THRESHOLD')):
        raw = get(name)
        if raw is not None:
            values[attr] = ParameterValidator.validate_unit_float(raw, ENV_PREFIX + name)

    raw = get('BACKEND')
    if raw is not None:
        values['backend'] = ParameterValidator.validate_choice(raw, ENV_PREFIX + 'BACKEND', BACKENDS)

    raw = get('LOG_LEVEL')
    if raw is not None:
        values['log_level'] = ParameterValidator.validate_choice(raw, ENV_PREFIX + 'LOG_LEVEL', LOG_LEVELS).upper()

    raw = get('LOG_DIR')
    if raw is not None:
        values['log_dir'] = raw

    for attr, name in (('log_to_file', 'LOG_TO_FILE'), ('structured_logs', 'STRUCTURED_LOGS')):
        raw = get(name)
        if raw is not None:
            values[attr] = _parse_bool(raw, ENV_PREFIX + name)

    raw = get('MAX_TEXT_LENGTH')
    if raw is not None:
        values['max_text_length'] = ParameterValidator.validate_positive_integer(raw, ENV_PREFIX + 'MAX_TEXT_LENGTH')

    settings = Settings(**{**defaults.__dict__, **values})

    total = settings.weight_cosine + settings.weight_edit + settings.weight_character
    if abs(total - 1.0) > 1e-9:
        raise ParameterValidationError(
            f"Similarity weights must sum to 1, got {total}",
            field="weights",
            value=(settings.weight_cosine, settings.weight_edit, settings.weight_character)
        )

    return settings
