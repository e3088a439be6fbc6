import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from platformdirs import user_config_dir
from .driver.dummy import DummyDriver


logger = logging.getLogger(__name__)


CONFIG_DIR = Path(user_config_dir("lasersvg"))
CONFIG_FILE = CONFIG_DIR / "config.yaml"


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


class ConfigManager:
    """
    Loads and saves the settings of the dummy driver as a YAML file.
    """

    def __init__(self, filepath: Path = CONFIG_FILE):
        self.filepath = Path(filepath)
        self.driver = DummyDriver()
        self.load_config()

    def load_config(self) -> DummyDriver:
        if not self.filepath.exists():
            logger.info(f"No config at {self.filepath}, using defaults")
            return self.driver

        with open(self.filepath, "r") as f:
            data: Optional[Dict[str, Any]] = yaml.safe_load(f)
        if not data:
            return self.driver

        settings = data.get("driver") or {}
        known = {
            k: v for k, v in settings.items() if k in self.driver.settings
        }
        for key in settings.keys() - known.keys():
            logger.warning(f"Ignoring unknown setting '{key}' in config")
        self.driver.apply_settings(known)
        logger.info(f"Config loaded from {self.filepath}")
        return self.driver

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(self.filepath, "w") as f:
            yaml.safe_dump({"driver": self.driver.get_settings()}, f)
        logger.info(f"Config saved to {self.filepath}")
