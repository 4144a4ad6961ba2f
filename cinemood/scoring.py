"""
Scoring module.
Scores catalog films against a mood vector and ranks them.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from .errors import MoodValidationError
from .models import DimensionScoredFilm, Film, MoodVector, TagScoredFilm


Randomness = Callable[[], float]

# axis -> (low-pole tag, high-pole tag)
# comfort and dialogue reuse another axis' label for one pole; the catalog is tagged that way
AXIS_POLES: Dict[str, Tuple[str, str]] = {
	'weight': ('light', 'heavy'),
	'pace': ('slow', 'fast'),
	'comfort': ('challenge', 'light'),
	'reality': ('dreamlike', 'real'),
	'era': ('classic', 'contemporary'),
	'social': ('solo', 'social'),
	'tone': ('dark', 'uplifting'),
	'dialogue': ('visual', 'social'),
}

LOW_THRESHOLD = 40
HIGH_THRESHOLD = 60
POLE_SCALE = 20.0

PERTURBATION_POLICIES = ('flat', 'entropy')


@dataclass
class ScoredFilm:
	film: Film  # catalog entry
	score: float  # final score including perturbation
	base_score: float  # deterministic part


class MoodScorer:
	"""
	Computes a match score per film:
	- tag films: linear pole contributions outside the [40, 60] dead zone
	- dimension films: mean positional closeness on each axis, scaled
	- a non-negative random perturbation, by one policy per instance
	"""

	def __init__(
		self,
		perturbation: str = 'flat',
		randomness: Optional[Randomness] = None,
		flat_scale: float = 0.5,
		entropy_scale: float = 0.08,
		dimension_weight: float = 1.5,
	):
		if perturbation not in PERTURBATION_POLICIES:
			raise ValueError(f"Unknown perturbation policy '{perturbation}'")
		self.perturbation = perturbation
		self.randomness = randomness or random.random
		self.flat_scale = flat_scale
		self.entropy_scale = entropy_scale
		self.dimension_weight = dimension_weight

	def base_score(self, film: Film, mood: MoodVector) -> float:
		"""Deterministic score, dispatched on the film variant."""
		if isinstance(film, TagScoredFilm):
			return self.tag_score(film, mood)
		if isinstance(film, DimensionScoredFilm):
			return self.dimension_score(film, mood)
		# Plain films carry nothing to match against
		return 0.0

	def tag_score(self, film: TagScoredFilm, mood: MoodVector) -> float:
		score = 0.0
		for axis, value in mood.as_dict().items():
			low, high = AXIS_POLES[axis]
			if low in film.tags:
				score += pole_contribution(value, low_pole=True)
			if high in film.tags:
				score += pole_contribution(value, low_pole=False)
		return score

	def dimension_score(self, film: DimensionScoredFilm, mood: MoodVector) -> float:
		values = mood.as_dict()
		axes = [axis for axis in values if axis in film.dimensions]
		if not axes:
			return 0.0
		closeness = sum((100 - abs(values[axis] - film.dimensions[axis])) / len(axes) for axis in axes)
		return closeness * self.dimension_weight

	def perturbation_bound(self, mood: MoodVector) -> float:
		"""Largest perturbation this policy can add for the given mood."""
		if self.perturbation == 'flat':
			return self.flat_scale
		return (100 - mood_entropy(mood)) * self.entropy_scale

	def score(self, film: Film, mood: MoodVector) -> ScoredFilm:
		base = self.base_score(film, mood)
		# randomness() is in [0, 1), so the perturbation is never negative
		noise = self.randomness() * self.perturbation_bound(mood)
		return ScoredFilm(film=film, score=base + noise, base_score=base)


def pole_contribution(value: float, low_pole: bool) -> float:
	"""0 inside the dead zone, rising linearly to 2.0 at the slider extreme."""
	if low_pole:
		return max(0, LOW_THRESHOLD - value) / POLE_SCALE
	return max(0, value - HIGH_THRESHOLD) / POLE_SCALE


def mood_entropy(mood: MoodVector) -> float:
	"""Mean distance from the midpoint; high for decisive moods, low for ambivalent ones."""
	values = list(mood.as_dict().values())
	return sum(abs(v - 50) for v in values) / len(values)


def rank_films(
	mood: Optional[MoodVector],
	catalog: Sequence[Film],
	top_n: int,
	randomness: Optional[Randomness] = None,
	perturbation: str = 'flat',
) -> List[Film]:
	"""
	Score every film, sort by descending score and return the first top_n,
	stripped of scoring fields. Ties keep catalog order.
	"""
	if mood is None:
		raise MoodValidationError("Mood data is required")
	if not catalog:
		return []

	scorer = MoodScorer(perturbation=perturbation, randomness=randomness)
	scored = [scorer.score(film, mood) for film in catalog]
	for s in scored:
		logger.debug(f"[Engine] {s.film.title} ({s.film.year}) base={s.base_score:.3f} final={s.score:.3f}")

	# sorted() is stable, so equal scores stay in insertion order
	scored = sorted(scored, key=lambda s: s.score, reverse=True)
	logger.info(f"[Engine] Ranked {len(scored)} films, returning top {min(top_n, len(scored))}")
	return [s.film.public() for s in scored[:top_n]]
