"""
Unit tests for poster resolution: memoization, placeholders and concurrent attachment.
Run: python -m pytest tests/test_posters.py
"""

import asyncio

import httpx

from cinemood.models import Film
from cinemood.posters import PosterCache, PosterResolver, placeholder_poster


STALKER_POSTER = 'https://m.media-amazon.com/images/stalker.jpg'


def make_resolver(handler, api_key='omdb-key'):
	calls = []

	def recording(request):
		calls.append(request)
		return handler(request)

	client = httpx.AsyncClient(transport=httpx.MockTransport(recording))
	return PosterResolver(client, api_key, cache=PosterCache()), calls


def omdb(request):
	title = request.url.params['t']
	return httpx.Response(200, json={'Title': title, 'Poster': f'https://img.example/{title.replace(" ", "_")}.jpg'})


def test_resolve_poster_is_idempotent():
	resolver, calls = make_resolver(lambda request: httpx.Response(200, json={'Poster': STALKER_POSTER}))

	first = asyncio.run(resolver.resolve_poster('Stalker', 1979))
	second = asyncio.run(resolver.resolve_poster('Stalker', 1979))

	assert first == second == STALKER_POSTER
	assert len(calls) == 1
	params = calls[0].url.params
	assert params['t'] == 'Stalker' and params['y'] == '1979' and params['type'] == 'movie'
	assert 'Stalker|1979' in resolver.cache
	assert len(resolver.cache) == 1


def test_same_title_different_year_is_a_different_entry():
	resolver, calls = make_resolver(omdb)
	asyncio.run(resolver.resolve_poster('Solaris', 1972))
	asyncio.run(resolver.resolve_poster('Solaris', 2002))
	assert len(calls) == 2


def test_no_poster_sentinel_gives_cached_placeholder():
	resolver, calls = make_resolver(lambda request: httpx.Response(200, json={'Poster': 'N/A'}))
	first = asyncio.run(resolver.resolve_poster('Come and See', 1985))
	second = asyncio.run(resolver.resolve_poster('Come and See', 1985))
	assert first == second == 'https://via.placeholder.com/300x450?text=Come%20and%20See'
	assert len(calls) == 1


def test_network_failure_gives_placeholder():
	def boom(request):
		raise httpx.ConnectError("connection refused", request=request)

	resolver, calls = make_resolver(boom)
	poster = asyncio.run(resolver.resolve_poster('Amélie', 2001))
	assert poster == placeholder_poster('Amélie')
	assert poster.startswith('https://via.placeholder.com/')
	asyncio.run(resolver.resolve_poster('Amélie', 2001))
	assert len(calls) == 1


def test_error_status_and_bad_json_give_placeholder():
	resolver, _ = make_resolver(lambda request: httpx.Response(401, json={'Error': 'Invalid API key!'}))
	assert asyncio.run(resolver.resolve_poster('Vertigo', 1958)) == placeholder_poster('Vertigo')

	resolver, _ = make_resolver(lambda request: httpx.Response(200, text='oops'))
	assert asyncio.run(resolver.resolve_poster('Vertigo', 1958)) == placeholder_poster('Vertigo')


def test_missing_key_uses_placeholder_without_calling():
	resolver, calls = make_resolver(omdb, api_key=None)
	assert asyncio.run(resolver.resolve_poster('Parasite', 2019)) == placeholder_poster('Parasite')
	assert calls == []


def test_placeholder_encodes_title():
	assert placeholder_poster("Pan's Labyrinth") == 'https://via.placeholder.com/300x450?text=Pan%27s%20Labyrinth'


def test_attach_posters_keeps_order_and_skips_remote_films():
	resolver, calls = make_resolver(omdb)
	films = [
		Film('Vertigo', 'Obsession.', 1958, 'Alfred Hitchcock'),
		Film('Dune', 'Sand.', 2024, 'Various', poster='https://image.tmdb.org/t/p/w300/dune.jpg', source='tmdb'),
		Film('Casablanca', 'Romance.', 1942, 'Michael Curtiz'),
	]

	resolved = asyncio.run(resolver.attach_posters(films))

	assert [f.title for f in resolved] == ['Vertigo', 'Dune', 'Casablanca']
	assert resolved[0].poster == 'https://img.example/Vertigo.jpg'
	assert resolved[1].poster == 'https://image.tmdb.org/t/p/w300/dune.jpg'
	assert resolved[2].poster == 'https://img.example/Casablanca.jpg'
	assert sorted(r.url.params['t'] for r in calls) == ['Casablanca', 'Vertigo']
	# inputs are immutable and untouched
	assert films[0].poster is None
