"""
Mood description module.
Turns a mood vector into one readable sentence, either from canned phrases or
through the OpenAI Responses API with a poetic fallback.
"""

import random
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger
from openai import AsyncOpenAI

from .models import MoodVector
from .scoring import HIGH_THRESHOLD, LOW_THRESHOLD


DEFAULT_MODEL = "gpt-4.1-mini"
REQUEST_TIMEOUT_SECONDS = 5.0
MAX_OUTPUT_TOKENS = 80

# axis -> (low, mid, high) phrase
AXIS_PHRASES: Dict[str, Tuple[str, str, str]] = {
	'weight': ("something light", "something with a little weight", "something heavy"),
	'pace': ("unhurried", "steadily paced", "fast-moving"),
	'comfort': ("that challenges you", "that balances ease and edge", "that feels like a warm blanket"),
	'reality': ("drifting into dreams", "hovering between dream and reality", "grounded in the real world"),
	'era': ("from the classic era", "from any era", "made recently"),
	'social': ("best watched alone", "for alone or together", "to share with friends"),
	'tone': ("dark at heart", "bittersweet", "uplifting"),
	'dialogue': ("told through images", "balancing image and word", "full of conversation"),
}

FALLBACK_DESCRIPTIONS: Tuple[str, ...] = (
	"A mood suspended between light and shadow, waiting for the right story.",
	"Tonight calls for a film that meets you exactly where you are.",
	"Somewhere between a sigh and a smile, a story is waiting.",
	"Your mood is a frame not yet filled; let a film paint it.",
	"A quiet longing for images that linger long after the credits.",
)


def classify(value: int) -> int:
	"""0 = low pole, 1 = neutral, 2 = high pole; same thresholds as scoring."""
	if value < LOW_THRESHOLD:
		return 0
	if value > HIGH_THRESHOLD:
		return 2
	return 1


def template_description(mood: MoodVector) -> str:
	values = mood.as_dict()
	phrases: List[str] = [AXIS_PHRASES[axis][classify(value)] for axis, value in values.items()]
	# weight and pace lead the sentence, the rest trail as qualifiers
	head = f"You're in the mood for {phrases[0]}, {phrases[1]}"
	tail = ", ".join(phrases[2:])
	return f"{head}, {tail}."


def build_prompt(mood: MoodVector) -> str:
	lines = [f"- {axis}: {value}/100" for axis, value in mood.as_dict().items()]
	return (
		"Describe this film-watching mood in one evocative sentence of at most 30 words.\n"
		"Each slider runs from 0 to 100: weight (light..heavy), pace (slow..fast), "
		"comfort (challenging..comforting), reality (dreamlike..real), era (classic..contemporary), "
		"social (solo..social), tone (dark..uplifting), dialogue (visual..talkative).\n"
		+ "\n".join(lines)
	)


class MoodDescriber:
	"""
	Describes moods with OpenAI when a key is configured, otherwise from templates.
	A client can be injected for tests.
	"""

	def __init__(
		self,
		api_key: Optional[str] = None,
		model: str = DEFAULT_MODEL,
		client=None,
		randomness: Optional[Callable[[], float]] = None,
	):
		self.model = model
		self.randomness = randomness or random.random
		self.client = client
		if self.client is None and api_key:
			self.client = AsyncOpenAI(api_key=api_key, timeout=REQUEST_TIMEOUT_SECONDS, max_retries=0)

	def fallback_description(self) -> str:
		index = int(self.randomness() * len(FALLBACK_DESCRIPTIONS)) % len(FALLBACK_DESCRIPTIONS)
		return FALLBACK_DESCRIPTIONS[index]

	async def describe_mood(self, mood: MoodVector) -> str:
		"""Return a non-empty sentence; never raises."""
		if self.client is None:
			return template_description(mood)

		try:
			response = await self.client.responses.create(
				model=self.model,
				input=build_prompt(mood),
				max_output_tokens=MAX_OUTPUT_TOKENS,
			)
			text = (response.output_text or "").strip()
		except Exception as e:
			# any SDK, network or payload error falls back to the poetic pool
			logger.warning(f"[Describer] Text generation failed: {e!r}")
			return self.fallback_description()

		if not text:
			logger.warning("[Describer] Text generation returned no text")
			return self.fallback_description()
		return text
