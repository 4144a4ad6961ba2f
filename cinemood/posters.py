"""
Poster resolution module.
Looks up posters on OMDb and memoizes them by title and year for the life of
the process, so a rate-limited service is asked about each film at most once.
"""

import asyncio  # concurrent fan-out over the selected films
from dataclasses import replace  # copy a frozen film with its poster set
from typing import Dict, List, Optional, Sequence  # type hints
from urllib.parse import quote  # url-encode titles for placeholder images

import httpx  # async HTTP client
from loguru import logger  # console logging

from .errors import RemoteServiceError  # raised internally, never propagated
from .models import Film  # film records


OMDB_URL = "https://www.omdbapi.com/"
PLACEHOLDER_TEMPLATE = "https://via.placeholder.com/300x450?text={title}"
REQUEST_TIMEOUT_SECONDS = 5.0
NO_POSTER = 'N/A'  # OMDb sentinel


def placeholder_poster(title: str) -> str:
	"""Deterministic placeholder image URL for a title."""
	return PLACEHOLDER_TEMPLATE.format(title=quote(title, safe=''))


def poster_cache_key(title: str, year: int) -> str:
	return f"{title}|{year}"


class PosterCache:
	"""Unbounded title|year -> poster URL memo; entries are never evicted."""

	def __init__(self):
		self._entries: Dict[str, str] = {}

	def get(self, title: str, year: int) -> Optional[str]:
		return self._entries.get(poster_cache_key(title, year))

	def put(self, title: str, year: int, url: str) -> None:
		self._entries[poster_cache_key(title, year)] = url

	def __len__(self) -> int:
		return len(self._entries)

	def __contains__(self, key: str) -> bool:
		return key in self._entries


class PosterResolver:
	"""Resolves poster URLs through OMDb, falling back to placeholders."""

	def __init__(
		self,
		client: httpx.AsyncClient,
		api_key: Optional[str],
		cache: Optional[PosterCache] = None,
		url: str = OMDB_URL,
		timeout: float = REQUEST_TIMEOUT_SECONDS,
	):
		self.client = client
		self.api_key = api_key
		self.cache = cache if cache is not None else PosterCache()
		self.url = url
		self.timeout = timeout

	async def resolve_poster(self, title: str, year: int) -> str:
		"""Return a poster URL for the film; never raises."""
		cached = self.cache.get(title, year)
		if cached is not None:
			return cached

		try:
			poster = await self._lookup(title, year)
			logger.debug(f"[Posters] Resolved poster for {title} ({year})")
		except RemoteServiceError as e:
			logger.warning(f"[Posters] Using placeholder for {title} ({year}): {e}")
			poster = placeholder_poster(title)

		# Placeholders are cached too, so repeated misses stay off the network
		self.cache.put(title, year, poster)
		return poster

	async def _lookup(self, title: str, year: int) -> str:
		if not self.api_key:
			raise RemoteServiceError("no OMDb API key configured")

		params = {'apikey': self.api_key, 't': title, 'y': year, 'type': 'movie'}
		try:
			response = await self.client.get(self.url, params=params, timeout=self.timeout)
		except httpx.HTTPError as e:
			raise RemoteServiceError(f"request failed: {e!r}") from e
		if not response.is_success:
			raise RemoteServiceError(f"OMDb request failed: {response.status_code}")

		try:
			poster = response.json().get('Poster')
		except (ValueError, AttributeError) as e:
			raise RemoteServiceError(f"malformed OMDb payload: {e!r}") from e
		if not poster or not isinstance(poster, str) or poster == NO_POSTER:
			raise RemoteServiceError("no poster on record")
		return poster

	async def attach_poster(self, film: Film) -> Film:
		# Remote films arrive with an authoritative poster
		if film.poster and film.source == 'tmdb':
			return film
		return replace(film, poster=await self.resolve_poster(film.title, film.year))

	async def attach_posters(self, films: Sequence[Film]) -> List[Film]:
		"""Resolve posters concurrently; output keeps the input order."""
		return list(await asyncio.gather(*(self.attach_poster(film) for film in films)))
