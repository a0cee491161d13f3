"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    word_list_path: str = "yawl-word-list-for-lb.txt"
    """Path to the newline-delimited word list, relative to the working directory."""

    log_dir: str = "logs"
    """Directory for per-run log files.  An empty string disables the log file."""

    max_depth: int = 6
    """Longest chain (in words) the search will consider before giving up. Default: 6."""

    max_solutions: int = 4
    """Number of solutions collected at shallow depths before returning. Default: 4."""

    early_return_depth: int = 3
    """Above this chain length, the search returns as soon as one solution is found.

    Default: 3.
    """

    min_word_length: int = 3
    """Shortest usable word. Default: 3."""

    max_word_length: int = 12
    """Longest usable word (one tap per letter slot on the box). Default: 12."""

    report_interval: int = Field(default=100_000, gt=0)
    """Interval (in number of popped search states) at which to report progress."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
