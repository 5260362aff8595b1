"""Runtime settings read from the environment (.env is loaded first).

  DATA_DIR       records + images root (default ./data)
  PARTS_ROOT     part image tree (default ./res)
  API_URL        public API base; images are served from {API_URL}/static
  FRONT_END_URL  base of the external_link in metadata
  LOG_LEVEL      logging level name (default INFO)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from .specification import AssetConfig

ROOT = Path(__file__).parent.parent


class Settings(BaseModel):
    data_dir: Path = ROOT / "data"
    parts_root: Path = ROOT / "res"
    api_url: str = "http://localhost:13013/api"
    front_end_url: str = "http://localhost:13014"
    log_level: str = "INFO"

    @property
    def static_uri(self) -> str:
        return f"{self.api_url.rstrip('/')}/static"

    def asset_config(self) -> AssetConfig:
        return AssetConfig(parts_root=self.parts_root, base_uri=self.static_uri)


def load_settings() -> Settings:
    load_dotenv(ROOT / ".env")
    defaults = Settings()
    return Settings(
        data_dir=Path(os.getenv("DATA_DIR", str(defaults.data_dir))),
        parts_root=Path(os.getenv("PARTS_ROOT", str(defaults.parts_root))),
        api_url=os.getenv("API_URL", defaults.api_url),
        front_end_url=os.getenv("FRONT_END_URL", defaults.front_end_url),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
