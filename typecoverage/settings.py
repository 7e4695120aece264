"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides config paths and the roster size limits enforced when loading rosters."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings

from typecoverage import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    MAX_ROSTER_SIZE: int = 6
    """Maximum number of members in a roster file."""

    MAX_MOVES_PER_MEMBER: int = 4
    """Maximum number of moves per roster member."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        return self.configs_dir / "logging.yml"


settings = Settings()
