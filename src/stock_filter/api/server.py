"""
FastAPI server for the stock filter.
This file wires:
- the configured data source (sample rows or a remote /api/stocks endpoint)
- the filter evaluator
- CORS and the web endpoints

Run locally:
    uvicorn stock_filter.api.server:app --reload --port 8000
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..clients.stock_client import load_stocks_async
from ..config import Settings, configure_logging, load_settings
from ..core.models import ConstraintSet
from ..core.session import ScreenerState, run_search
from ..sample_data import SAMPLE_STOCKS

logger = logging.getLogger(__name__)


class SearchResponse(BaseModel):
    results: List[dict]
    count: int
    message: Optional[str] = None
    constraints: dict


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    app = FastAPI(title="NYSE Stock Filter API", version="0.1.0")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("API Error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})

    @app.get("/api/stocks")
    async def list_stocks():
        """Serve the sample dataset in the {success, data, count, message} envelope."""
        data = [s.to_wire() for s in SAMPLE_STOCKS]
        return {
            "success": True,
            "data": data,
            "count": len(data),
            "message": "API working - using sample data",
        }

    @app.post("/api/search", response_model=SearchResponse)
    async def search(constraints: ConstraintSet):
        """Load records from the configured source and return those matching *constraints*."""
        records = await load_stocks_async(settings)
        state = run_search(ScreenerState(constraints=constraints), records)
        logger.info("search matched %d of %d stocks", state.count, len(records))
        return SearchResponse(
            results=[r.to_wire() for r in state.results],
            count=state.count,
            message=state.error,
            constraints=constraints.to_form(),
        )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("stock_filter.api.server:app", host="0.0.0.0", port=8000, reload=True)
