"""FastAPI main application."""

from typing import Iterable, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..clean.tracking_params import CATEGORY_PARAMS, TRACKING_PATTERNS, ALL_KNOWN_PARAMS
from ..clean.url_cleaner import clean_url, contains_tracking_parameters, tracking_parameters
from ..config import CORS_ALLOW_ORIGINS, DEFAULT_WHITELIST, API_HOST, API_PORT
from ..logging import setup_logging, get_logger
from .. import __version__
from .models import (
    BatchCleanRequest,
    BatchCleanResponse,
    CleanRequest,
    CleanResponse,
    HealthResponse,
    InspectResponse,
    ParametersResponse,
)

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="URL Cleanser",
    description="Strips tracking query parameters from URLs",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _whitelist(requested: Optional[Iterable[str]]) -> frozenset:
    """Merge the request whitelist with the configured default."""
    return DEFAULT_WHITELIST.union(requested or ())


def _clean_one(url: str, whitelist: frozenset) -> CleanResponse:
    cleaned = clean_url(url, whitelist)
    return CleanResponse(
        url=url,
        cleaned_url=cleaned,
        removed=tracking_parameters(url, whitelist),
        changed=cleaned != url,
    )


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok")


@app.post("/clean", response_model=CleanResponse)
async def clean(request: CleanRequest):
    """Remove tracking parameters from a single URL."""
    try:
        result = _clean_one(request.url, _whitelist(request.whitelist))
        logger.info(f"Clean request: {request.url} -> {result.cleaned_url}")
        return result

    except Exception as e:
        logger.error(f"Error in clean endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@app.post("/clean/batch", response_model=BatchCleanResponse)
async def clean_batch(request: BatchCleanRequest):
    """Remove tracking parameters from many URLs, keeping input order."""
    try:
        whitelist = _whitelist(request.whitelist)
        results = [_clean_one(url, whitelist) for url in request.urls]
        changed = sum(1 for r in results if r.changed)
        logger.info(f"Batch clean request: {len(results)} URLs, {changed} changed")
        return BatchCleanResponse(results=results)

    except Exception as e:
        logger.error(f"Error in batch clean endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@app.post("/inspect", response_model=InspectResponse)
async def inspect(request: CleanRequest):
    """Report the tracking parameters carried by a URL without changing it."""
    try:
        whitelist = _whitelist(request.whitelist)
        return InspectResponse(
            url=request.url,
            contains_tracking=contains_tracking_parameters(request.url, whitelist),
            tracking_parameters=tracking_parameters(request.url, whitelist),
        )

    except Exception as e:
        logger.error(f"Error in inspect endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@app.get("/parameters", response_model=ParametersResponse)
async def parameters():
    """List known tracking parameters by category and the fallback patterns."""
    return ParametersResponse(
        categories={
            category.value: sorted(names)
            for category, names in CATEGORY_PARAMS.items()
        },
        patterns=[pattern.pattern for pattern in TRACKING_PATTERNS],
        total=len(ALL_KNOWN_PARAMS),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
