# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .lifespan import lifespan
from .orchestrator import handle_request


def make_server() -> FastAPI:
    """Create the HTTP server."""
    app = FastAPI(title="hhdocs uploader", version=__version__, lifespan=lifespan)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/add-files-to-repo")
    async def add_files_to_repo(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            return JSONResponse({"error": "Request body must be valid JSON"}, status_code=400)

        result = await handle_request(body)
        return JSONResponse(result.content, status_code=result.status_code)

    return app
