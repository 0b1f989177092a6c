"""
.env file discovery for Brixie.

The CLI calls this before building settings so that a Rebrickable key kept
in a project or home-directory .env file is picked up without exporting it.
"""

from pathlib import Path
from typing import Optional, Dict
import logging

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)


class EnvFileLoader:
    """
    .env file loader with hierarchical search.

    Search order (stops at first file found):
    1. Current directory: .brixie/.env → .env
    2. Parent directories (up to git root or home): .brixie/.env → .env
    3. Home directory: ~/.brixie/.env → ~/.env
    """

    CONFIG_DIR_NAME = ".brixie"
    ENV_FILE_NAME = ".env"

    def __init__(self, working_directory: Optional[Path] = None):
        self.working_directory = Path(working_directory or Path.cwd()).resolve()
        self._loaded_file: Optional[Path] = None
        self._loaded_vars: Dict[str, str] = {}

    def load_env_file(self) -> Optional[Path]:
        """Load environment variables from the first .env file found.

        Variables already present in the environment are not overridden.

        Returns:
            Path to loaded .env file or None if none found
        """
        env_file_path = self.find_env_file()
        if env_file_path is None:
            logger.debug("No .env file found in search path")
            return None

        load_dotenv(env_file_path, override=False)
        self._loaded_file = env_file_path
        self._loaded_vars = {
            key: value
            for key, value in dotenv_values(env_file_path).items()
            if value is not None
        }
        logger.info(f"Loaded environment variables from: {env_file_path}")
        return env_file_path

    def get_loaded_file(self) -> Optional[Path]:
        return self._loaded_file

    def get_loaded_vars(self) -> Dict[str, str]:
        return self._loaded_vars.copy()

    def find_env_file(self) -> Optional[Path]:
        """Find the first .env file in the search hierarchy."""
        current_dir = self.working_directory

        while current_dir != current_dir.parent:
            candidate = self._env_file_in(current_dir)
            if candidate:
                return candidate

            if self._should_stop_search(current_dir):
                break

            current_dir = current_dir.parent

        return self._env_file_in(Path.home())

    def _env_file_in(self, directory: Path) -> Optional[Path]:
        # .brixie/.env takes precedence over a bare .env
        for candidate in (
            directory / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME,
            directory / self.ENV_FILE_NAME,
        ):
            if candidate.is_file():
                return candidate
        return None

    def _should_stop_search(self, directory: Path) -> bool:
        """Stop at a git repository root or at the home directory."""
        if (directory / ".git").exists():
            return True
        return directory == Path.home()
