# pathfixer\shared\config.py
from enum import Enum
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathfixer.core.domain.models import RewriteConfig


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


DEFAULT_INTERNAL_PATHS: List[str] = [
    "/ve-chung-toi/",
    "/lien-he/",
    "/tien-mat-linh-hoat/",
    "/vay-mua-xe-may/",
    "/vay-mua-dien-thoai-dien-may/",
    "/the-tin-dung/",
    "/bao-hiem-lien-ket/",
    "/mua-truoc-tra-sau/",
    "/san-pham-b-w/",
    "/tin-tuc-khuyen-mai/tin-tuc/",
    "/tin-tuc-khuyen-mai/khuyen-mai/",
    "/thanh-toan-truc-tuyen/",
    "/tim-diem-thanh-toan-giai-ngan/",
    "/khach-hang-to-chuc/",
    "/cau-hoi-thuong-gap/",
    "/gui-yeu-cau-va-khieu-nai/",
    "/cam-nang-truc-tuyen/",
    "/cam-nang-truc-tuyen/meo-tai-chinh/",
    "/tra-cuu-khong-lam-phien/",
]


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    Every field can be overridden with a `PATHFIX_`-prefixed environment
    variable or a `.env` file in the working directory. List fields take a
    JSON array, e.g. PATHFIX_INTERNAL_PATHS='["/about/", "/contact/"]'.
    """

    # --- Deployment Layout ---
    BASE_PATH: str = "/fecredit"
    WWW_PATH: str = "/fecredit/www.fecredit.com.vn"
    DEFAULT_FILE: str = "www.fecredit.com.vn/index.html"

    # Site-relative links that need the base path prepended
    INTERNAL_PATHS: List[str] = list(DEFAULT_INTERNAL_PATHS)

    # --- Reporting ---
    PREVIEW_LIMIT: int = 5

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(env_prefix="PATHFIX_", env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    def rewrite_config(self) -> RewriteConfig:
        """Freezes the path settings into the value object the rule builder consumes."""
        return RewriteConfig(
            base_path=self.BASE_PATH,
            www_path=self.WWW_PATH,
            internal_paths=tuple(self.INTERNAL_PATHS),
        )


settings = Settings()
