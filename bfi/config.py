from dataclasses import dataclass
from typing import Mapping, Optional
import os

# Runtime settings for the command-line runner, read from the environment.
# The CLI calls dotenv.load_dotenv() first so a local .env file is honoured.

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    log_level: str = "WARNING"
    color: bool = True
    source_suffix: str = ".bf"
    encoding: str = "utf-8"
    trace_window: int = 10

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from BF_* variables, falling back to the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        trace_window = env.get("BF_TRACE_WINDOW", str(defaults.trace_window))
        try:
            window = int(trace_window)
        except ValueError:
            raise ValueError(f"BF_TRACE_WINDOW must be an integer, got {trace_window!r}") from None
        if window < 1:
            raise ValueError(f"BF_TRACE_WINDOW must be positive, got {window}")
        return cls(
            log_level=env.get("BF_LOG_LEVEL", defaults.log_level).upper(),
            color=env.get("BF_COLOR", "1").strip().lower() not in _FALSE_VALUES,
            source_suffix=env.get("BF_SOURCE_SUFFIX", defaults.source_suffix),
            encoding=env.get("BF_ENCODING", defaults.encoding),
            trace_window=window,
        )
