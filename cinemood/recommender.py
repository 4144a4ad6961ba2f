"""
Recommendation service module.
Owns the caches and remote clients for one application and runs the
request-level flows: recommend films for a mood, serve the default list,
and describe a mood.
"""

from typing import Callable, List, Optional  # type annotations for clarity
import random  # default randomness source

import httpx  # shared async HTTP client
from loguru import logger  # simple structured logger

# Import project modules for data structures and components
from .catalog import get_default_films, get_static_catalog  # curated films
from .config import Settings  # runtime configuration
from .describer import MoodDescriber  # mood sentences
from .models import Film, MoodVector  # core data classes
from .posters import PosterCache, PosterResolver  # poster lookups + memo
from .scoring import rank_films  # mood scoring and ranking
from .tmdb_catalog import RemoteCatalogCache, RemoteCatalogFetcher  # popular films


class RecommendationService:
	"""
	High-level API combining the static catalog, the remote catalog, scoring and posters.
	Every cache belongs to the instance, so two services never share state.
	"""
	def __init__(
		self,
		settings: Settings,  # keys and deployment constants
		client: httpx.AsyncClient,  # shared outbound HTTP client
		randomness: Optional[Callable[[], float]] = None,  # injected for reproducible ranking
		catalog_cache: Optional[RemoteCatalogCache] = None,  # remote catalog memo
		poster_cache: Optional[PosterCache] = None,  # poster memo
		describer: Optional[MoodDescriber] = None,  # mood sentence generator
	):
		self.settings = settings  # keep config reference
		self.client = client  # used by fetcher and resolver
		self.randomness = randomness or random.random  # score perturbation source
		self.static_catalog = get_static_catalog(settings.catalog_variant)  # read-only films
		self.fetcher = RemoteCatalogFetcher(client, settings.tmdb_api_key, cache=catalog_cache)  # TMDb popular
		self.posters = PosterResolver(client, settings.omdb_api_key, cache=poster_cache)  # OMDb posters
		self.describer = describer or MoodDescriber(  # OpenAI or templates
			api_key=settings.openai_api_key,
			model=settings.openai_model,
			randomness=self.randomness,
		)
		logger.info(
			f"[Engine] Ready | catalog={settings.catalog_variant} ({len(self.static_catalog)} films) "
			f"perturbation={settings.perturbation} top_n={settings.top_n}"
		)

	async def candidate_catalog(self) -> List[Film]:
		"""Static films first, then whatever the remote catalog yields."""
		# Dense catalogs are positioned on all eight axes; remote films only carry tags
		if self.settings.catalog_variant != 'tags':
			return list(self.static_catalog)
		remote = await self.fetcher.fetch_remote_catalog()  # cached for an hour
		logger.debug(f"[Engine] Candidate pool: {len(self.static_catalog)} static + {len(remote)} remote")
		return list(self.static_catalog) + list(remote)

	async def generate_films(self, mood: MoodVector) -> List[Film]:
		"""Rank the merged catalog for a mood and attach posters to the winners."""
		catalog = await self.candidate_catalog()  # merged candidate pool
		top = rank_films(  # deterministic score + perturbation, sorted, sliced
			mood,
			catalog,
			top_n=self.settings.top_n,
			randomness=self.randomness,
			perturbation=self.settings.perturbation,
		)
		films = await self.posters.attach_posters(top)  # concurrent lookups, ranking order kept
		logger.info(f"[Engine] Recommending {[f.title for f in films]}")  # summary
		return films

	async def default_films(self) -> List[Film]:
		"""The fixed fallback list with posters resolved."""
		return await self.posters.attach_posters(get_default_films())

	async def describe_mood(self, mood: MoodVector) -> str:
		"""One sentence describing the mood; never raises."""
		return await self.describer.describe_mood(mood)

	def fallback_description(self) -> str:
		"""Generic sentence for when describing fails outright."""
		return self.describer.fallback_description()
