"""
Data models for the CineMood recommender.
Defines the mood vector and the film records used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field, asdict  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, FrozenSet, Mapping, Optional  # mappings, optional values, tag sets

from .errors import MoodValidationError  # raised for uninterpretable mood input


# The six canonical slider dimensions, in UI order
CANONICAL_DIMENSIONS = ('weight', 'pace', 'comfort', 'reality', 'era', 'social')
# Extended deployments add two more sliders
EXTENDED_DIMENSIONS = ('tone', 'dialogue')
ALL_DIMENSIONS = CANONICAL_DIMENSIONS + EXTENDED_DIMENSIONS

NEUTRAL_VALUE = 50  # slider midpoint, used for missing canonical dimensions
MIN_VALUE = 0
MAX_VALUE = 100


@dataclass(frozen=True)
class MoodVector:
	"""
	The user's position on each slider, every value in [0, 100].
	Extended dimensions are None unless the caller supplied them.
	"""
	weight: int = NEUTRAL_VALUE  # light (0) .. heavy (100)
	pace: int = NEUTRAL_VALUE  # slow .. fast
	comfort: int = NEUTRAL_VALUE  # challenging .. comforting
	reality: int = NEUTRAL_VALUE  # dreamlike .. real
	era: int = NEUTRAL_VALUE  # classic .. contemporary
	social: int = NEUTRAL_VALUE  # solo .. social
	tone: Optional[int] = None  # dark .. uplifting (extended)
	dialogue: Optional[int] = None  # visual .. talkative (extended)

	@classmethod
	def from_mapping(cls, data: Mapping[str, Any]) -> 'MoodVector':
		"""
		Build a vector from loosely typed slider input.
		Values are clamped into [0, 100], unknown keys ignored, and missing
		canonical dimensions fall back to the neutral midpoint.
		"""
		if data is None:
			raise MoodValidationError("Mood data is required")
		if not isinstance(data, Mapping):
			raise MoodValidationError("Mood must be an object of slider values")

		values: Dict[str, int] = {}
		for name in ALL_DIMENSIONS:
			if name not in data or data[name] is None:
				continue  # keep the dataclass default
			values[name] = _clamp(_as_number(name, data[name]))
		return cls(**values)

	def as_dict(self) -> Dict[str, int]:
		"""Return only the dimensions that carry a value."""
		return {name: value for name, value in asdict(self).items() if value is not None}


def _as_number(name: str, raw: Any) -> float:
	# bool is an int subclass, but a checkbox value is never a slider position
	if isinstance(raw, bool):
		raise MoodValidationError(f"Mood dimension '{name}' must be a number")
	# JSON integers are unbounded; clamp before float() can overflow
	if isinstance(raw, int):
		return float(max(MIN_VALUE, min(MAX_VALUE, raw)))
	try:
		return float(raw)
	except (TypeError, ValueError):
		raise MoodValidationError(f"Mood dimension '{name}' must be a number") from None


def _clamp(value: float) -> int:
	return int(round(max(MIN_VALUE, min(MAX_VALUE, value))))


@dataclass(frozen=True)
class Film:
	"""
	Public view of a film, as returned to callers.
	Scoring-only attributes live on the catalog variants below.
	"""
	title: str  # display title, never empty
	description: str  # one-line pitch shown on the card
	year: int  # release year (e.g., 1979)
	director: str  # director's name, or "Various" for remote entries
	poster: Optional[str] = None  # poster image URL once known
	source: str = 'catalog'  # 'catalog' for static films, 'tmdb' for remote ones

	def public(self) -> 'Film':
		"""Strip variant-specific scoring fields, keeping the display fields."""
		return Film(
			title=self.title,
			description=self.description,
			year=self.year,
			director=self.director,
			poster=self.poster,
			source=self.source,
		)

	def to_dict(self) -> Dict[str, Any]:
		"""JSON-ready mapping; `source` is only exposed for remote films."""
		data = {
			'title': self.title,
			'description': self.description,
			'year': self.year,
			'director': self.director,
			'poster': self.poster,
		}
		if self.source != 'catalog':
			data['source'] = self.source
		return data


@dataclass(frozen=True)
class TagScoredFilm(Film):
	"""A film described by categorical labels such as 'heavy' or 'classic'."""
	tags: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class DimensionScoredFilm(Film):
	"""A film positioned directly on each mood axis (dense scoring)."""
	dimensions: Mapping[str, int] = field(default_factory=dict)
