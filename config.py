"""
Configuration Management

Reads settings from environment variables, after loading an optional .env
file from the project root.
"""

import logging
import os
from pathlib import Path
from typing import Optional

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration manager for the DFA tools"""

    def __init__(self, env_path: Optional[Path] = None):
        self._load_env(env_path or Path(__file__).parent / ".env")

    def _load_env(self, env_path: Path):
        """Load KEY=VALUE lines from a .env file; variables already set win"""
        if env_path.exists():
            with open(env_path, 'r') as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        os.environ.setdefault(key.strip(), value.strip())

    @property
    def log_level(self) -> str:
        """Logging level name (default: WARNING)"""
        return os.getenv('DFAMIN_LOG_LEVEL', 'WARNING').upper()

    @property
    def log_level_number(self) -> int:
        """Logging level as understood by the logging module"""
        return getattr(logging, self.log_level, logging.WARNING)

    @property
    def max_refinement_rounds(self) -> Optional[int]:
        """Cap on minimization refinement rounds (default: none)"""
        value = os.getenv('DFAMIN_MAX_ROUNDS')
        if not value:
            return None
        return int(value)

    @property
    def strict_alphabets(self) -> bool:
        """Raise instead of answering False when equivalence is asked over different alphabets (default: False)"""
        return os.getenv('DFAMIN_STRICT_ALPHABETS', 'false').lower() == 'true'

    @property
    def diagram_path(self) -> str:
        """Where diagrams are written (default: automata.png)"""
        return os.getenv('DFAMIN_DIAGRAM_PATH', 'automata.png')

    def validate(self) -> bool:
        """Validate configuration"""
        if self.log_level not in _LOG_LEVELS:
            return False
        try:
            rounds = self.max_refinement_rounds
        except ValueError:
            return False
        if rounds is not None and rounds <= 0:
            return False
        return True


# Global config instance
config = Config()


def get_config() -> Config:
    """Get global configuration instance"""
    return config
