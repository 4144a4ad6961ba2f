"""
FastAPI server exposing the mood recommendation API.
Endpoints:
- POST /api/generate-films: ranks films for a mood and attaches posters
- POST /api/mood-description: one-sentence description of a mood
- GET /api/health: basic health check

Startup opens one shared HTTP client and builds the recommendation service
(static catalog, TMDb popular-films cache, OMDb poster cache).

Run: python api.py   (or: uvicorn api:app --port 3001)
"""

# Import standard libraries for timing and timestamps
import time  # measure startup and request latencies
from datetime import datetime, timezone  # ISO-8601 health timestamps
from typing import Any, Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for request/response models
import httpx  # shared async HTTP client for remote services
import uvicorn  # ASGI server
from fastapi import FastAPI, Request  # FastAPI primitives
from fastapi.exceptions import RequestValidationError  # malformed request bodies
from fastapi.middleware.cors import CORSMiddleware  # browser cross-origin access
from fastapi.responses import JSONResponse  # custom error envelopes
from pydantic import BaseModel  # request/response schema definitions
from starlette.exceptions import HTTPException as StarletteHTTPException  # routing errors (404/405)

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Import our internal modules for configuration, input parsing and recommendation
from cinemood.config import Settings, configure_logging, load_settings, log_key_status  # env settings
from cinemood.errors import MoodValidationError  # client input errors
from cinemood.models import Film, MoodVector  # core records
from cinemood.recommender import RecommendationService  # recommendation flows


# Pydantic model for the recommendation request body
class GenerateFilmsRequest(BaseModel):
	mood: Optional[Dict[str, Any]] = None  # slider values keyed by dimension
	hasImage: Any = False  # whether the UI has an uploaded image (informational, never validated)


# Pydantic model for the description request body
class MoodDescriptionRequest(BaseModel):
	mood: Optional[Dict[str, Any]] = None  # slider values keyed by dimension


# Pydantic model that describes the shape of a single film in responses
class FilmOut(BaseModel):
	title: str  # display title
	description: str  # one-line pitch
	year: int  # release year
	director: str  # director name
	poster: Optional[str] = None  # poster image URL
	source: Optional[str] = None  # 'tmdb' for remote films, omitted for catalog films


# Pydantic model for the recommendation response payload
class FilmsResponse(BaseModel):
	films: List[FilmOut]  # ranked films
	success: Optional[bool] = None  # set on the normal path
	fallback: Optional[bool] = None  # set when the default list was served


# Pydantic model for the description response payload
class DescriptionResponse(BaseModel):
	description: str  # generated or templated sentence
	success: Optional[bool] = None  # set on the normal path
	fallback: Optional[bool] = None  # set when a generic sentence was served


def _films_out(films: List[Film]) -> List[FilmOut]:
	"""Convert engine films to response schema."""
	return [FilmOut(**film.to_dict()) for film in films]


def _parse_mood(raw: Optional[Dict[str, Any]]) -> MoodVector:
	"""Turn the raw request mood into a MoodVector or raise a client error."""
	if raw is None:  # mood entirely absent
		raise MoodValidationError("Mood data is required")
	return MoodVector.from_mapping(raw)  # clamps values, rejects non-numbers


def _error(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={"error": message})


def create_app(settings: Optional[Settings] = None, service: Optional[RecommendationService] = None) -> FastAPI:
	"""
	Build the FastAPI application.
	Passing a service skips client creation at startup (tests inject one backed by a mock transport).
	"""
	settings = settings or load_settings()  # env-driven config

	# Instantiate the FastAPI application with metadata
	app = FastAPI(title="CineMood API", version="1.0.0")  # web app
	app.state.settings = settings  # expose to handlers
	app.state.service = service  # None until startup when not injected
	app.state.owned_client = None  # client we must close on shutdown

	# Allow the browser UI to call us
	app.add_middleware(
		CORSMiddleware,
		allow_origins=[settings.frontend_url],  # the configured frontend only
		allow_methods=["GET", "POST", "OPTIONS"],
		allow_headers=["*"],
	)

	# FastAPI startup hook to initialize the service once
	@app.on_event("startup")
	async def startup_event():
		"""Create the shared HTTP client and the recommendation service."""
		start = time.time()  # start timer for startup latency
		configure_logging(settings.log_level)  # route loguru to stderr at configured level
		logger.info(f"[API] Startup ({settings.app_env}): initializing recommendation service...")  # log intent
		log_key_status(settings)  # report which remote features are live

		if app.state.service is None:  # nothing injected: build the real thing
			client = httpx.AsyncClient(follow_redirects=True)  # one client for TMDb and OMDb
			app.state.owned_client = client  # remember for shutdown
			app.state.service = RecommendationService(settings, client)  # owns both caches

		logger.info(f"[API] Startup complete in {time.time() - start:.2f}s. Allowed origin: {settings.frontend_url}")  # summary log

	# FastAPI shutdown hook to release network resources
	@app.on_event("shutdown")
	async def shutdown_event():
		"""Close the HTTP client if this app created it."""
		if app.state.owned_client is not None:
			await app.state.owned_client.aclose()  # release connections
			app.state.owned_client = None
			logger.info("[API] HTTP client closed")

	# Missing or malformed request bodies are client errors
	@app.exception_handler(RequestValidationError)
	async def validation_error_handler(request: Request, exc: RequestValidationError):
		logger.warning(f"[API] Invalid request to {request.url.path}: {len(exc.errors())} validation error(s)")
		return _error(400, "Invalid request body")

	# Unknown routes (or methods) get a JSON 404
	@app.exception_handler(StarletteHTTPException)
	async def http_error_handler(request: Request, exc: StarletteHTTPException):
		if exc.status_code in (404, 405):  # unmatched route or method
			return _error(404, "Endpoint not found")
		return _error(exc.status_code, str(exc.detail))

	# Anything unexpected is logged in full and masked for the caller
	@app.exception_handler(Exception)
	async def internal_error_handler(request: Request, exc: Exception):
		logger.opt(exception=exc).error(f"[API] Unhandled error on {request.method} {request.url.path}")
		return _error(500, "Internal server error")

	# Simple health endpoint for readiness checks
	@app.get("/api/health")
	async def health():
		"""Return minimal health info for liveness/readiness probes."""
		now = datetime.now(timezone.utc)  # current UTC time
		return {
			"status": "ok",  # constant indicator
			"timestamp": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),  # ISO-8601
		}

	# Main recommendation endpoint
	@app.post("/api/generate-films", response_model=FilmsResponse, response_model_exclude_none=True)
	async def generate_films(body: GenerateFilmsRequest):
		"""Rank films for the mood; on internal failure serve the default list instead."""
		try:
			mood = _parse_mood(body.mood)  # validate before anything else
		except MoodValidationError as e:
			logger.warning(f"[API] /api/generate-films rejected: {e}")  # client error
			return _error(400, str(e))

		service: RecommendationService = app.state.service  # initialized at startup
		start = time.time()  # start timer
		logger.debug(f"[API] /api/generate-films mood={mood.as_dict()} hasImage={body.hasImage}")  # debug log of input

		try:
			films = await service.generate_films(mood)  # score, rank, resolve posters
		except Exception:
			# the UI never sees a hard failure once the mood is valid
			logger.exception("[API] Recommendation failed, serving default films")
			return FilmsResponse(films=_films_out(await service.default_films()), fallback=True)

		elapsed_ms = (time.time() - start) * 1000  # compute ms
		logger.info(f"[API] /api/generate-films served {len(films)} films in {elapsed_ms:.2f} ms")  # summary
		return FilmsResponse(films=_films_out(films), success=True)

	# Optional description endpoint
	@app.post("/api/mood-description", response_model=DescriptionResponse, response_model_exclude_none=True)
	async def mood_description(body: MoodDescriptionRequest):
		"""Describe the mood in one sentence; on internal failure serve a generic one."""
		try:
			mood = _parse_mood(body.mood)  # validate input
		except MoodValidationError as e:
			logger.warning(f"[API] /api/mood-description rejected: {e}")  # client error
			return _error(400, str(e))

		service: RecommendationService = app.state.service  # initialized at startup
		try:
			description = await service.describe_mood(mood)  # templated or generated
		except Exception:
			logger.exception("[API] Mood description failed, serving generic sentence")
			return DescriptionResponse(description=service.fallback_description(), fallback=True)

		return DescriptionResponse(description=description, success=True)

	return app


# Module-level application for `uvicorn api:app`
app = create_app()


if __name__ == "__main__":
	uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)  # serve on the configured port
