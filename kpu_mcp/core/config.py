import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from kpu_mcp.core.errors import ConfigurationError

API_KEY_ENV = "KPU_API_KEY"


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load the configuration from the YAML file into the class variable _config.
        """
        config_path = os.path.join(os.path.dirname(__file__), "..", "config.yaml")
        config_path = os.path.abspath(config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            cls._config = yaml.safe_load(f) or {}

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


def load_env() -> None:
    """Load `.env` from the project root, then from the current working directory.

    Variables already present in the environment win over both files.
    """
    project_env = Path(__file__).resolve().parent.parent.parent / ".env"
    if project_env.is_file():
        load_dotenv(project_env)
    load_dotenv()


def get_api_key() -> str:
    """Return the upstream API key, raising ConfigurationError when it is not set."""
    load_env()
    api_key = os.environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigurationError(f"Paste {API_KEY_ENV} inside the .env file")
    return api_key
