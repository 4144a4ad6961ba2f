"""
Remote catalog module.
Pulls TMDb's popular films, maps them into tag-scored catalog entries and
caches the list for an hour so request volume never drives outbound calls.
"""

import time  # monotonic clock for the cache TTL
from dataclasses import dataclass, field  # cache container
from typing import Any, Callable, Dict, List, Optional  # type hints

import httpx  # async HTTP client
from loguru import logger  # console logging

from .errors import RemoteServiceError  # raised internally, never propagated
from .models import TagScoredFilm  # catalog record for remote films


TMDB_POPULAR_URL = "https://api.themoviedb.org/3/movie/popular"
TMDB_POSTER_BASE = "https://image.tmdb.org/t/p/w300"
CATALOG_TTL_SECONDS = 3600.0
REQUEST_TIMEOUT_SECONDS = 5.0
MAX_REMOTE_FILMS = 20
DEFAULT_OVERVIEW = "A compelling film from TMDb."


@dataclass
class RemoteCatalogCache:
	"""Last fetched remote catalog and when it was fetched."""
	ttl: float = CATALOG_TTL_SECONDS  # seconds a fetched list stays fresh
	films: Optional[List[TagScoredFilm]] = None  # None until the first successful fetch
	fetched_at: float = 0.0  # clock reading at the last successful fetch
	clock: Callable[[], float] = field(default=time.monotonic, repr=False)  # injectable for tests

	def get(self) -> Optional[List[TagScoredFilm]]:
		"""Return the cached list while it is fresh, otherwise None."""
		if self.films is not None and self.clock() - self.fetched_at < self.ttl:
			return self.films
		return None

	def store(self, films: List[TagScoredFilm]) -> None:
		self.films = films
		self.fetched_at = self.clock()


def tag_for_rating(vote_average: float) -> str:
	"""Coarse mood tag from TMDb's average rating."""
	if vote_average > 7:
		return 'challenge'
	if vote_average > 6:
		return 'comfort'
	return 'light'


def map_tmdb_film(item: Dict[str, Any]) -> TagScoredFilm:
	"""Map one TMDb result into the catalog schema."""
	return TagScoredFilm(
		title=item['title'],
		description=item.get('overview') or DEFAULT_OVERVIEW,
		year=int(item['release_date'].split('-')[0]),
		director='Various',
		poster=f"{TMDB_POSTER_BASE}{item['poster_path']}",
		source='tmdb',
		tags=frozenset([tag_for_rating(float(item.get('vote_average') or 0))]),
	)


class RemoteCatalogFetcher:
	"""
	Fetches popular films from TMDb through a shared AsyncClient.
	The cache object is injected so each application (or test) owns its own.
	"""

	def __init__(
		self,
		client: httpx.AsyncClient,
		api_key: Optional[str],
		cache: Optional[RemoteCatalogCache] = None,
		url: str = TMDB_POPULAR_URL,
		timeout: float = REQUEST_TIMEOUT_SECONDS,
	):
		self.client = client
		self.api_key = api_key
		self.cache = cache or RemoteCatalogCache()
		self.url = url
		self.timeout = timeout

	async def fetch_remote_catalog(self) -> List[TagScoredFilm]:
		"""Return the remote films, from cache when fresh; empty on any failure."""
		cached = self.cache.get()
		if cached is not None:
			logger.debug(f"[TMDb] Cache hit with {len(cached)} films")
			return cached

		try:
			films = await self._fetch()
		except RemoteServiceError as e:
			logger.warning(f"[TMDb] Remote catalog unavailable: {e}")
			return []

		self.cache.store(films)
		logger.info(f"[TMDb] Fetched {len(films)} popular films")
		return films

	async def _fetch(self) -> List[TagScoredFilm]:
		if not self.api_key:
			raise RemoteServiceError("no TMDb API key configured")

		params = {'api_key': self.api_key, 'language': 'en-US', 'page': 1}
		try:
			response = await self.client.get(self.url, params=params, timeout=self.timeout)
		except httpx.HTTPError as e:
			raise RemoteServiceError(f"request failed: {e!r}") from e
		if not response.is_success:
			raise RemoteServiceError(f"TMDb request failed: {response.status_code}")

		try:
			results = response.json().get('results') or []
			usable = [item for item in results if item.get('poster_path') and item.get('release_date')]
			return [map_tmdb_film(item) for item in usable[:MAX_REMOTE_FILMS]]
		except (ValueError, KeyError, TypeError, AttributeError) as e:
			raise RemoteServiceError(f"malformed TMDb payload: {e!r}") from e
