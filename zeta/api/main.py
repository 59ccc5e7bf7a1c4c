"""
FastAPI application entry point.

Serves the story flow over HTTP: catalogs, preview, and generation.
Optional API key authentication (API_AUTH_ENABLED / API_KEY).
"""

import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from zeta import __version__
from zeta.infra.logging_config import setup_logging
from .routers import story
from .dependencies.auth import verify_api_key


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    yield


# Tag metadata for Swagger UI
tags_metadata = [
    {
        "name": "story",
        "description": "Questionnaire catalogs, answer preview, and bedtime story generation",
    },
]

app = FastAPI(
    title="Zeta Bedtime Story API",
    lifespan=lifespan,
    description="""
## Zeta Bedtime Story API

Turns questionnaire answers (character, setting, helper, challenge,
magical element, ending) into a soothing bedtime story via Gemini.

### Authentication
When `API_AUTH_ENABLED=true`, all endpoints except `/health` require
an `X-API-Key` header matching the `API_KEY` environment variable.

### Usage
```bash
uvicorn zeta.api.main:app --host 127.0.0.1 --port 8000

curl -X POST http://localhost:8000/story/generate \\
  -H "Content-Type: application/json" \\
  -d '{"character": "animal", "setting": "forest", "helper": "fairy_godparent",
       "challenge": "finding_something_lost", "magic": "flying", "ending": "peaceful_sleep"}'
```
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=tags_metadata,
)


# Health check - NO authentication
@app.get("/health")
async def health_check():
    """Health check endpoint. Not authenticated."""
    return {"status": "ok", "version": __version__}


app.include_router(
    story.router, prefix="/story", tags=["story"], dependencies=[Depends(verify_api_key)]
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
