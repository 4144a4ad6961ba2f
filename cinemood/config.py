"""
Runtime configuration.
Settings come from the environment, after loading .env and .env.local from
the working directory. A missing API key only disables the feature it powers.
"""

import os  # environment access
import sys  # stderr sink for loguru
from dataclasses import dataclass  # settings container
from typing import Optional  # optional API keys

from dotenv import load_dotenv  # .env support
from loguru import logger  # console logging

from .catalog import CATALOG_VARIANTS  # valid catalog variant names


@dataclass(frozen=True)
class Settings:
	tmdb_api_key: Optional[str] = None  # remote popular-films catalog
	omdb_api_key: Optional[str] = None  # poster lookups
	openai_api_key: Optional[str] = None  # generative mood descriptions
	openai_model: str = "gpt-4.1-mini"  # model used for descriptions
	port: int = 3001  # listening port
	frontend_url: str = "http://localhost:3000"  # allowed cross-origin caller
	app_env: str = "development"  # informational only
	top_n: int = 8  # films returned per recommendation
	catalog_variant: str = "tags"  # 'tags' (six axes) or 'dimensions' (eight axes)
	log_level: str = "INFO"  # loguru level

	@property
	def perturbation(self) -> str:
		"""Randomness policy paired with the catalog variant."""
		return 'entropy' if self.catalog_variant == 'dimensions' else 'flat'


def _env_int(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	try:
		return int(raw)
	except ValueError:
		raise ValueError(f"{name} must be an integer, got '{raw}'") from None


def load_settings() -> Settings:
	"""Read settings from the environment (.env files first, .env.local wins)."""
	load_dotenv('.env')
	load_dotenv('.env.local', override=True)

	variant = os.getenv("CATALOG_VARIANT", "tags")
	if variant not in CATALOG_VARIANTS:
		raise ValueError(f"CATALOG_VARIANT must be one of {CATALOG_VARIANTS}, got '{variant}'")

	top_n = _env_int("TOP_N", 8)
	if top_n < 1:
		raise ValueError("TOP_N must be at least 1")

	return Settings(
		tmdb_api_key=os.getenv("TMDB_API_KEY") or None,
		omdb_api_key=os.getenv("OMDB_API_KEY") or None,
		openai_api_key=os.getenv("OPENAI_API_KEY") or None,
		openai_model=os.getenv("OPENAI_MODEL", "gpt-4.1-mini"),
		port=_env_int("PORT", 3001),
		frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
		app_env=os.getenv("APP_ENV", "development"),
		top_n=top_n,
		catalog_variant=variant,
		log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
	)


def configure_logging(level: str = "INFO") -> None:
	"""Send loguru output to stderr at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level)


def log_key_status(settings: Settings) -> None:
	for label, key in (("TMDb", settings.tmdb_api_key), ("OMDb", settings.omdb_api_key), ("OpenAI", settings.openai_api_key)):
		if key:
			logger.info(f"[Config] {label} API key loaded")
		else:
			logger.warning(f"[Config] {label} API key not found; feature will degrade")
