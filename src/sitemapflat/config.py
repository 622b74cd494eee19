# SitemapFlat — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


DEFAULT_USER_AGENT = "SitemapFlat/0.1 (+https://example.com)"


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with SITEMAPFLAT_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="SITEMAPFLAT_", env_file=".env", extra="ignore")

	user_agent: str = Field(default=DEFAULT_USER_AGENT)
	delay: float = Field(default=0.5, ge=0.0)
	timeout: float = Field(default=12.0, gt=0.0)
	max_pages: Optional[int] = Field(default=None, ge=0)
	max_workers: int = Field(default=1, ge=1)
	retries: int = Field(default=3, ge=0)
	backoff: float = Field(default=0.5, ge=0.0)
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")

