"""
HTTP API for PawMatch.
Thin JSON handlers over PawMatchService for pets, users, matches and status.
"""

import sys
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .config import settings
from .agent import PawMatchService, UserNotFoundError, InitializationError
from .utils.validators import MissingFieldsError

# Configure logging
logger.remove()  # Remove default handler
logger.add(sys.stderr, level=settings.log_level.upper())


def dump(model) -> Dict[str, Any]:
    """Serialize a schema object with its camelCase wire names."""
    return model.model_dump(mode="json", by_alias=True)


def error_response(error: str, status_code: int, **extra: Any) -> JSONResponse:
    return JSONResponse(content={"error": error, **extra}, status_code=status_code)


async def read_json_body(request: Request) -> Optional[Dict[str, Any]]:
    """Parse the request body as a JSON object, None if it is not one."""
    try:
        body = await request.json()
    except ValueError as e:
        logger.error(f"Failed to parse request body: {e}")
        return None
    return body if isinstance(body, dict) else None


def get_service(request: Request) -> PawMatchService:
    return request.app.state.service


def create_app(service: Optional[PawMatchService] = None) -> FastAPI:
    """
    Build the FastAPI application around a single service instance.

    Args:
        service: Service to serve; a new one is created when omitted

    Returns:
        Configured FastAPI app
    """
    service = service or PawMatchService()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("PawMatch API is starting up...")
        logger.info(f"Environment: {service.settings.environment}")
        logger.info(f"OpenAI configured: {'Yes' if service.recommender.use_llm else 'No (heuristic matching)'}")
        logger.info(f"Match write mode: {service.settings.match_write_mode}")
        if not service.initializer.ensure_initialized():
            logger.warning("Initial initialization attempt failed, will retry when needed")
        logger.info("Startup complete - ready to accept requests")
        yield
        logger.info("PawMatch API shutting down")

    app = FastAPI(
        title="PawMatch API",
        description="Pet adoption matching: list pets, register adopters, score matches",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.service = service

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": "PawMatch API",
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "health": "/health",
                "pets": "/api/pets",
                "users": "/api/users",
                "match": "/api/match",
                "debug": "/api/debug",
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        logger.debug("Health check called")
        return {"status": "healthy", "service": "pawmatch-api"}

    @app.get("/api/pets")
    async def list_pets(service: PawMatchService = Depends(get_service)):
        """All pets in the store, unfiltered."""
        try:
            pets = service.list_pets()
            logger.info(f"GET pets: {len(pets)} pets found")
            return {"pets": [dump(pet) for pet in pets]}
        except Exception as e:
            logger.exception(f"Error in GET pets: {e}")
            return error_response("Failed to fetch pets", 500, details=str(e))

    @app.post("/api/pets")
    async def create_pet(request: Request, service: PawMatchService = Depends(get_service)):
        """List a new pet. Name, type, age, description and personality are required."""
        body = await read_json_body(request)
        if body is None:
            return error_response("Invalid request body", 400)

        try:
            pet = service.create_pet(body)
            return {"pet": dump(pet)}
        except MissingFieldsError as e:
            return error_response("Missing required fields", 400, required=e.required)
        except ValueError as e:
            return error_response("Invalid pet data", 400, details=str(e))
        except Exception as e:
            logger.exception(f"Error in POST pet: {e}")
            return error_response("Failed to create pet", 500, details=str(e))

    @app.post("/api/users")
    async def create_user(request: Request, service: PawMatchService = Depends(get_service)):
        """Register an adopter profile."""
        body = await read_json_body(request)
        if body is None:
            return error_response("Invalid request body", 400)

        try:
            user = service.create_user(body)
            return {"userId": user.id}
        except MissingFieldsError:
            return error_response("Missing required fields", 400)
        except ValueError as e:
            return error_response("Invalid user data", 400, details=str(e))
        except Exception as e:
            logger.exception(f"Error in users route: {e}")
            return error_response("Failed to create user", 500, details=str(e))

    @app.post("/api/match")
    async def create_matches(request: Request, service: PawMatchService = Depends(get_service)):
        """Score every pet for a user and return all of the user's matches."""
        try:
            body = await read_json_body(request)
            if body is None:
                return error_response("Invalid request body", 400)

            user_id = body.get("userId")
            if not user_id:
                logger.error("Missing userId in request")
                return error_response("userId is required", 400)

            outcome = await service.find_matches_async(
                str(user_id), force_reload=bool(body.get("forceReload"))
            )

            content: Dict[str, Any] = {"matches": [dump(m) for m in outcome.matches]}
            if outcome.warning:
                content["warning"] = outcome.warning
            return content

        except InitializationError as e:
            return error_response(str(e), 500)
        except UserNotFoundError as e:
            logger.error(f"User not found: {e}")
            return error_response("User not found", 404)
        except Exception as e:
            logger.exception(f"Error in match route POST: {e}")
            return error_response("Failed to generate matches", 500, details=str(e))

    @app.get("/api/match")
    async def get_matches(
        userId: Optional[str] = None,
        service: PawMatchService = Depends(get_service),
    ):
        """Previously recorded matches for a user, best first."""
        if not userId:
            logger.error("Missing userId in GET request")
            return error_response("User ID is required", 400)

        try:
            matches = service.get_matches(userId)
            logger.info(f"GET matches for {userId}: {len(matches)}")
            return {"matches": [dump(m) for m in matches]}
        except InitializationError as e:
            return error_response(str(e), 500)
        except Exception as e:
            logger.exception(f"Error in match route GET: {e}")
            return error_response("Failed to fetch matches", 500, details=str(e))

    @app.get("/api/debug")
    async def debug_status(service: PawMatchService = Depends(get_service)):
        """Read-only store and initialization status."""
        verified = service.initializer.verify()
        return {
            **service.status(),
            "initialization": "verified" if verified else "failed verification",
        }

    @app.post("/api/debug/reload")
    async def debug_reload(service: PawMatchService = Depends(get_service)):
        """Force a reseed of the sample catalog."""
        try:
            success = service.reload()
            return {
                **service.status(),
                "reload": "forced reload",
                "initialization": "succeeded" if success else "failed",
            }
        except Exception as e:
            logger.exception(f"Error in debug reload: {e}")
            return error_response("Debug route error", 500, message=str(e))

    logger.info("FastAPI app initialized successfully")
    return app


app = create_app()
