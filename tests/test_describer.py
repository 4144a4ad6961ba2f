"""
Unit tests for mood descriptions: templates, generative path and fallbacks.
Run: python -m pytest tests/test_describer.py
"""

import asyncio
from types import SimpleNamespace

from cinemood.describer import FALLBACK_DESCRIPTIONS, MoodDescriber, build_prompt, classify, template_description
from cinemood.models import MoodVector


def fake_client(create):
	return SimpleNamespace(responses=SimpleNamespace(create=create))


def test_classify_uses_scoring_thresholds():
	assert [classify(v) for v in (0, 39, 40, 60, 61, 100)] == [0, 0, 1, 1, 2, 2]


def test_template_description_reflects_each_axis():
	mood = MoodVector(weight=90, pace=10, comfort=5, reality=80, era=10, social=20)
	text = template_description(mood)
	assert text.startswith("You're in the mood for something heavy, unhurried")
	assert "that challenges you" in text
	assert "grounded in the real world" in text
	assert "from the classic era" in text
	assert text.endswith("best watched alone.")


def test_template_includes_extended_axes():
	text = template_description(MoodVector(tone=95, dialogue=5))
	assert "uplifting" in text and "told through images" in text


def test_without_key_describer_uses_template():
	describer = MoodDescriber(api_key=None)
	mood = MoodVector()
	assert describer.client is None
	assert asyncio.run(describer.describe_mood(mood)) == template_description(mood)


def test_generated_text_is_returned_stripped():
	seen = {}

	async def create(**kwargs):
		seen.update(kwargs)
		return SimpleNamespace(output_text="  A hush of grey afternoons.\n")

	describer = MoodDescriber(model='test-model', client=fake_client(create))
	mood = MoodVector(weight=80)
	assert asyncio.run(describer.describe_mood(mood)) == "A hush of grey afternoons."
	assert seen['model'] == 'test-model'
	assert "weight: 80/100" in seen['input']


def test_generation_failure_falls_back_to_pool():
	async def create(**kwargs):
		raise TimeoutError("slow upstream")

	describer = MoodDescriber(client=fake_client(create), randomness=lambda: 0.0)
	assert asyncio.run(describer.describe_mood(MoodVector())) == FALLBACK_DESCRIPTIONS[0]


def test_empty_generation_falls_back_to_pool():
	async def create(**kwargs):
		return SimpleNamespace(output_text="   ")

	describer = MoodDescriber(client=fake_client(create), randomness=lambda: 0.99)
	assert asyncio.run(describer.describe_mood(MoodVector())) == FALLBACK_DESCRIPTIONS[-1]


def test_prompt_lists_every_present_axis():
	prompt = build_prompt(MoodVector(tone=10))
	for axis in ('weight', 'pace', 'comfort', 'reality', 'era', 'social', 'tone'):
		assert f"- {axis}: " in prompt
	assert "- dialogue: " not in prompt
