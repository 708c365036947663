"""Configuration for dominant-color: .env loading and extraction settings.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read from the environment:
  DOMINANT_COLOR_MAX_SAMPLES      pixels sampled per image (default 4096)
  DOMINANT_COLOR_BUCKET_BITS      bits kept per channel when bucketing (default 4)
  DOMINANT_COLOR_ALPHA_THRESHOLD  alpha below this counts as transparent (default 255)
  DOMINANT_COLOR_BACKEND          default decoding backend (default pillow)
  DOMINANT_COLOR_LOG_LEVEL        logging level (default WARNING)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dominant_color.core.quantize import DEFAULT_BUCKET_BITS
from dominant_color.core.sampling import DEFAULT_MAX_SAMPLES

ENV_PREFIX = 'DOMINANT_COLOR_'
DEFAULT_BACKEND = 'pillow'
DEFAULT_LOG_LEVEL = 'WARNING'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return the first .env found, stop at a .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone and a file in a worktree
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped, comments skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load a .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value
    return path


def _int_setting(env: Mapping[str, str], name: str, default: int, low: int, high: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None
    if not low <= value <= high:
        raise ValueError(f'{ENV_PREFIX}{name} must be between {low} and {high}, got {value}')
    return value


@dataclass(frozen=True)
class ExtractionConfig:
    """Process-wide extraction constants. Read during extraction, never mutated."""

    max_samples: int = DEFAULT_MAX_SAMPLES
    bucket_bits: int = DEFAULT_BUCKET_BITS
    alpha_threshold: int = 255

    def __post_init__(self) -> None:
        if self.max_samples < 1:
            raise ValueError(f'max_samples must be >= 1, got {self.max_samples}')
        if not 1 <= self.bucket_bits <= 8:
            raise ValueError(f'bucket_bits must be between 1 and 8, got {self.bucket_bits}')
        if not 1 <= self.alpha_threshold <= 255:
            raise ValueError(f'alpha_threshold must be between 1 and 255, got {self.alpha_threshold}')

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ExtractionConfig:
        """Build a config from DOMINANT_COLOR_* variables, defaults for anything unset."""
        env = os.environ if env is None else env
        return cls(
            max_samples=_int_setting(env, 'MAX_SAMPLES', DEFAULT_MAX_SAMPLES, 1, 10_000_000),
            bucket_bits=_int_setting(env, 'BUCKET_BITS', DEFAULT_BUCKET_BITS, 1, 8),
            alpha_threshold=_int_setting(env, 'ALPHA_THRESHOLD', 255, 1, 255),
        )


def default_backend(env: Mapping[str, str] | None = None) -> str:
    env = os.environ if env is None else env
    return env.get(ENV_PREFIX + 'BACKEND') or DEFAULT_BACKEND


def log_level(env: Mapping[str, str] | None = None) -> str:
    env = os.environ if env is None else env
    return (env.get(ENV_PREFIX + 'LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper()
