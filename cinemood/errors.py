"""
Error types shared across the recommender.
"""


class MoodValidationError(ValueError):
	"""Request input is missing or cannot be read as a mood vector (client error)."""


class RemoteServiceError(RuntimeError):
	"""A third-party service failed, timed out, or is not configured.

	Always recovered close to where it is raised; callers degrade the affected
	feature instead of failing the request.
	"""
