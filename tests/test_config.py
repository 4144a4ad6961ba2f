"""
Unit tests for environment-driven settings.
Run: python -m pytest tests/test_config.py
"""

import pytest

from cinemood.config import load_settings


ENV_NAMES = (
	'TMDB_API_KEY', 'OMDB_API_KEY', 'OPENAI_API_KEY', 'OPENAI_MODEL', 'PORT',
	'FRONTEND_URL', 'APP_ENV', 'TOP_N', 'CATALOG_VARIANT', 'LOG_LEVEL',
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
	for name in ENV_NAMES:
		monkeypatch.delenv(name, raising=False)
	monkeypatch.chdir(tmp_path)  # keep stray .env files out of the way
	return monkeypatch


def test_defaults(clean_env):
	settings = load_settings()
	assert settings.tmdb_api_key is None
	assert settings.omdb_api_key is None
	assert settings.openai_api_key is None
	assert settings.port == 3001
	assert settings.top_n == 8
	assert settings.catalog_variant == 'tags'
	assert settings.perturbation == 'flat'
	assert settings.frontend_url == 'http://localhost:3000'


def test_reads_environment(clean_env):
	clean_env.setenv('TMDB_API_KEY', 'abc')
	clean_env.setenv('PORT', '8080')
	clean_env.setenv('TOP_N', '6')
	clean_env.setenv('CATALOG_VARIANT', 'dimensions')
	clean_env.setenv('LOG_LEVEL', 'debug')
	settings = load_settings()
	assert settings.tmdb_api_key == 'abc'
	assert settings.port == 8080
	assert settings.top_n == 6
	assert settings.perturbation == 'entropy'
	assert settings.log_level == 'DEBUG'


def test_empty_key_counts_as_missing(clean_env):
	clean_env.setenv('OMDB_API_KEY', '')
	assert load_settings().omdb_api_key is None


def test_env_local_file_is_loaded(clean_env, tmp_path):
	clean_env.setenv('OPENAI_API_KEY', '')  # restored at teardown
	(tmp_path / '.env.local').write_text('OPENAI_API_KEY=from-file\n', encoding='utf-8')
	assert load_settings().openai_api_key == 'from-file'


@pytest.mark.parametrize('name, value', [('CATALOG_VARIANT', 'genres'), ('TOP_N', '0'), ('PORT', 'eighty')])
def test_invalid_values_rejected(clean_env, name, value):
	clean_env.setenv(name, value)
	with pytest.raises(ValueError):
		load_settings()
