"""FastAPI application setup for Cercanía."""

import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..errors import InvalidArgument, NotFound
from ..logging import setup_logging
from .affirmations import router as affirmations_router
from .pages import router as pages_router
from .parties import router as parties_router

# Configure logging
setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cercanía API",
    description="Political parties, their positions and the closeness test",
    version="0.1.0",
)

# Configure CORS
cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in cors_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
    )


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message}
    )


app.include_router(affirmations_router, prefix="/affirmations", tags=["affirmations"])
app.include_router(parties_router, tags=["parties"])
app.include_router(pages_router, prefix="/pages", tags=["pages"])


@app.get("/")
async def root():
    return {"message": "Cercanía API"}
