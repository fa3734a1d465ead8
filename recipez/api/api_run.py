from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from recipez.domain.errors import RecipezError
from recipez.api.routes import grocery, recipes
from recipez.utilities.config import CORS_ORIGINS

# Logging
logger = logging.getLogger("recipez_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create the data directory and empty collections once at startup
    recipes.get_recipe_repository().store.ensure_exists()
    grocery.get_grocery_repository().store.ensure_exists()
    logger.info("Data files ready")
    yield


# Initialize FastAPI app
app = FastAPI(title="Recip-EZ Recipe & Grocery API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(recipes.router)
app.include_router(grocery.router)


# -------------------- Error handling --------------------
@app.exception_handler(RecipezError)
async def recipez_error_handler(request: Request, exc: RecipezError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _describe(errors) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query"))
        msg = err.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _describe(exc.errors())
    logger.info("%s %s rejected (400): %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


__all__ = ['app']
