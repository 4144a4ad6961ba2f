"""
Static film catalog.
Holds the curated films the recommender always knows about, in two shapes:
- 'tags': films labelled with mood poles (light/heavy, slow/fast, ...)
- 'dimensions': films placed directly on all eight mood axes
plus the fixed default list served when recommendation fails.
"""

from typing import Dict, List, Tuple  # type hints

from loguru import logger  # console logging

from .models import DimensionScoredFilm, Film, TagScoredFilm  # catalog records


CATALOG_VARIANTS = ('tags', 'dimensions')


def _tagged(title: str, description: str, year: int, director: str, *tags: str) -> TagScoredFilm:
	return TagScoredFilm(title=title, description=description, year=year, director=director, tags=frozenset(tags))


# Grouped by the mood each block was curated for
TAG_CATALOG: Tuple[TagScoredFilm, ...] = (
	# Light & Comfort
	_tagged('Amélie', 'Whimsy and magic in ordinary Parisian moments.', 2001, 'Jean-Pierre Jeunet', 'light', 'comfort', 'contemporary', 'vibrant'),
	_tagged('The Grand Budapest Hotel', 'A beautifully composed pastiche of elegance and melancholy.', 2014, 'Wes Anderson', 'light', 'comfort', 'contemporary', 'social'),
	_tagged('Paddington 2', 'Pure-hearted adventure wrapped in British charm.', 2017, 'Paul King', 'light', 'comfort', 'contemporary', 'social'),

	# Heavy & Challenge
	_tagged('Requiem for a Dream', 'Descent into addiction rendered with visceral poetry.', 2000, 'Darren Aronofsky', 'heavy', 'challenge', 'contemporary', 'solo'),
	_tagged('Come and See', 'War through the eyes of a boy—devastating and unforgettable.', 1985, 'Elem Klimov', 'heavy', 'challenge', 'real'),
	_tagged('Synecdoche, New York', 'Reality collapses into art in this labyrinthine meditation.', 2008, 'Charlie Kaufman', 'heavy', 'challenge', 'dreamlike', 'contemporary'),

	# Slow Burn
	_tagged('Stalker', 'A meditative journey through emotion and existential wonder.', 1979, 'Andrei Tarkovsky', 'slow', 'dreamlike', 'classic', 'challenge'),
	_tagged('In the Mood for Love', 'Repressed desire blooms through frames of saturated color.', 2000, 'Wong Kar-wai', 'slow', 'dreamlike', 'contemporary', 'romantic'),
	_tagged('Tokyo Story', 'Profound humanity emerges from quiet domestic moments.', 1953, 'Yasujirō Ozu', 'slow', 'real', 'classic', 'social'),

	# Fast Paced
	_tagged('Parasite', 'Class warfare explodes with dark comic energy and precision.', 2019, 'Bong Joon-ho', 'fast', 'heavy', 'contemporary', 'social'),
	_tagged('Mad Max: Fury Road', 'Pure kinetic poetry—a two-hour chase driven by visual perfection.', 2015, 'George Miller', 'fast', 'heavy', 'contemporary', 'challenge'),
	_tagged('Terminator 2', 'Action elevated to art through innovation and precision.', 1991, 'James Cameron', 'fast', 'challenge', 'contemporary'),

	# Dreamlike
	_tagged('Mulholland Drive', 'Dreams collapse into deception in this shimmering fever dream.', 2001, 'David Lynch', 'dreamlike', 'heavy', 'contemporary', 'solo'),
	_tagged("Pan's Labyrinth", 'Myth and fascism collide in a haunting visual fantasia.', 2006, 'Guillermo del Toro', 'dreamlike', 'heavy', 'contemporary', 'challenge'),
	_tagged('The Fountain', 'Three eras of love and loss rendered in visual wonder.', 2006, 'Darren Aronofsky', 'dreamlike', 'heavy', 'contemporary', 'solo'),

	# Real & Contemporary
	_tagged('Before Sunrise', 'Two strangers discover connection through language and presence.', 1995, 'Richard Linklater', 'real', 'contemporary', 'solo', 'slow'),
	_tagged('Boyhood', 'Twelve years of life captured with intimate authenticity.', 2014, 'Richard Linklater', 'real', 'contemporary', 'slow', 'social'),
	_tagged('Moonlight', 'Three moments in a life rendered with poetic grace.', 2016, 'Barry Jenkins', 'real', 'contemporary', 'slow', 'solo'),

	# Classic
	_tagged('The Seventh Seal', 'A knight confronts mortality with quiet philosophical grace.', 1957, 'Ingmar Bergman', 'classic', 'heavy', 'challenge', 'slow'),
	_tagged('Vertigo', 'Obsession rendered as visual mastery and psychological torment.', 1958, 'Alfred Hitchcock', 'classic', 'challenge', 'slow', 'solo'),
	_tagged('Casablanca', 'Sacrifice and romance amid wartime intrigue.', 1942, 'Michael Curtiz', 'classic', 'heavy', 'social', 'romantic'),

	# Social
	_tagged('Chungking Express', 'Chance encounters blossom into unexpected romance.', 1994, 'Wong Kar-wai', 'social', 'dreamlike', 'contemporary', 'light'),
	_tagged('Memories of Murder', 'A procedural spiral into darkness and moral ambiguity.', 2003, 'Bong Joon-ho', 'social', 'heavy', 'contemporary', 'challenge'),
	_tagged('La La Land', 'Romance and ambition dance through a modern city.', 2016, 'Damien Chazelle', 'social', 'light', 'contemporary', 'romantic'),
)


def _placed(title: str, description: str, year: int, director: str, **dimensions: int) -> DimensionScoredFilm:
	return DimensionScoredFilm(title=title, description=description, year=year, director=director, dimensions=dimensions)


# Axis order: weight, pace, comfort, reality, era, social, tone, dialogue
DIMENSION_CATALOG: Tuple[DimensionScoredFilm, ...] = (
	_placed('Amélie', 'Whimsy and magic in ordinary Parisian moments.', 2001, 'Jean-Pierre Jeunet',
		weight=15, pace=60, comfort=90, reality=30, era=75, social=55, tone=90, dialogue=45),
	_placed('Paddington 2', 'Pure-hearted adventure wrapped in British charm.', 2017, 'Paul King',
		weight=5, pace=65, comfort=100, reality=45, era=90, social=85, tone=100, dialogue=55),
	_placed('Requiem for a Dream', 'Descent into addiction rendered with visceral poetry.', 2000, 'Darren Aronofsky',
		weight=100, pace=80, comfort=0, reality=70, era=70, social=10, tone=0, dialogue=35),
	_placed('Come and See', 'War through the eyes of a boy—devastating and unforgettable.', 1985, 'Elem Klimov',
		weight=100, pace=40, comfort=0, reality=85, era=35, social=20, tone=5, dialogue=20),
	_placed('Stalker', 'A meditative journey through emotion and existential wonder.', 1979, 'Andrei Tarkovsky',
		weight=80, pace=5, comfort=10, reality=25, era=20, social=15, tone=35, dialogue=60),
	_placed('Tokyo Story', 'Profound humanity emerges from quiet domestic moments.', 1953, 'Yasujirō Ozu',
		weight=65, pace=5, comfort=55, reality=95, era=5, social=70, tone=40, dialogue=65),
	_placed('Mad Max: Fury Road', 'Pure kinetic poetry—a two-hour chase driven by visual perfection.', 2015, 'George Miller',
		weight=60, pace=100, comfort=35, reality=40, era=85, social=50, tone=55, dialogue=5),
	_placed('Mulholland Drive', 'Dreams collapse into deception in this shimmering fever dream.', 2001, 'David Lynch',
		weight=80, pace=40, comfort=10, reality=5, era=70, social=20, tone=20, dialogue=50),
	_placed('Before Sunrise', 'Two strangers discover connection through language and presence.', 1995, 'Richard Linklater',
		weight=35, pace=20, comfort=75, reality=90, era=60, social=45, tone=75, dialogue=100),
	_placed('The Seventh Seal', 'A knight confronts mortality with quiet philosophical grace.', 1957, 'Ingmar Bergman',
		weight=95, pace=15, comfort=10, reality=50, era=5, social=25, tone=20, dialogue=75),
	_placed('Chungking Express', 'Chance encounters blossom into unexpected romance.', 1994, 'Wong Kar-wai',
		weight=30, pace=70, comfort=70, reality=45, era=60, social=75, tone=80, dialogue=40),
	_placed('La La Land', 'Romance and ambition dance through a modern city.', 2016, 'Damien Chazelle',
		weight=35, pace=60, comfort=80, reality=35, era=85, social=80, tone=70, dialogue=55),
)


# Served when recommendation fails; posters are resolved at request time
DEFAULT_FILMS: Tuple[Film, ...] = (
	Film('Stalker', 'A meditative journey through emotion and existential wonder.', 1979, 'Andrei Tarkovsky'),
	Film('Mulholland Drive', 'Dreams collapse into deception in this shimmering fever dream.', 2001, 'David Lynch'),
	Film('Before Sunrise', 'Two strangers discover connection through language and presence.', 1995, 'Richard Linklater'),
	Film('The Seventh Seal', 'A knight confronts mortality with quiet philosophical grace.', 1957, 'Ingmar Bergman'),
	Film('Chungking Express', 'Chance encounters blossom into unexpected romance.', 1994, 'Wong Kar-wai'),
	Film('Memories of Murder', 'A procedural spiral into darkness and moral ambiguity.', 2003, 'Bong Joon-ho'),
	Film('Amélie', 'Whimsy and magic in ordinary Parisian moments.', 2001, 'Jean-Pierre Jeunet'),
	Film('The Grand Budapest Hotel', 'A beautifully composed pastiche of elegance and melancholy.', 2014, 'Wes Anderson'),
)

_CATALOGS: Dict[str, Tuple[Film, ...]] = {
	'tags': TAG_CATALOG,
	'dimensions': DIMENSION_CATALOG,
}


def get_static_catalog(variant: str = 'tags') -> List[Film]:
	"""Return the curated catalog for a deployment variant."""
	if variant not in _CATALOGS:
		raise ValueError(f"Unknown catalog variant '{variant}'; expected one of {CATALOG_VARIANTS}")
	films = list(_CATALOGS[variant])
	logger.debug(f"[Catalog] Static '{variant}' catalog with {len(films)} films")
	return films


def get_default_films() -> List[Film]:
	"""Return the fixed fallback list, in display order."""
	return list(DEFAULT_FILMS)
