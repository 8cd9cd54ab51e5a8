"""
FastAPI backend for the Complexity Gate.

Minimal API that takes code plus rules and returns the counted summary.
"""

import logging
import time
from datetime import datetime
from typing import Union

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from complexity_gate import __version__
from complexity_gate.analyzer import RuleComplexityAnalyzer
from complexity_gate.config import configure_logging, get_settings
from complexity_gate.models import AnalysisSummary, ComplexityRule
from providers.groq_provider import GroqProvider

# Load environment variables
load_dotenv()

configure_logging()
logger = logging.getLogger(__name__)


# Request/Response Models
class AnalyzeRequest(BaseModel):
    """Request model: code, rules and the limit to check against."""
    code: str = Field(..., description="Code to analyze", min_length=1)
    rules: list[ComplexityRule] = Field(..., description="Rules to count", min_length=1)
    limit: Union[int, float] = Field(..., description="Maximum allowed total count")


class AnalyzeResponse(BaseModel):
    """Response model with the aggregated summary."""
    success: bool
    summary: AnalysisSummary | None = None
    model: str | None = None
    error: str | None = None


def get_provider() -> GroqProvider:
    """Provider dependency; overridden in tests."""
    return GroqProvider.from_settings(get_settings())


# Initialize FastAPI
app = FastAPI(
    title="Complexity Gate",
    description="Count rule matches in code using an LLM and check them against a limit",
    version=__version__,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Complexity Gate API",
        "version": __version__,
        "endpoints": {
            "/analyze": "POST - Count rule matches (input: code, rules, limit)",
            "/health": "GET - Health check"
        }
    }


@app.get("/health")
async def health():
    """Health check."""
    return {"status": "healthy", "model": get_settings().GROQ_MODEL}


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_code(request: AnalyzeRequest, provider=Depends(get_provider)):
    """
    Analyze code against a rule list.

    Per-rule failures are reported in ``summary.skipped``; only an
    unexpected error fails the request.
    """
    request_id = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    start_time = time.time()

    logger.info(
        f"[{request_id}] REQUEST RECEIVED - Code length: {len(request.code)} chars, "
        f"rules: {len(request.rules)}"
    )

    try:
        async with RuleComplexityAnalyzer(provider) as analyzer:
            summary = await analyzer.analyze(request.code, request.rules, request.limit)
    except Exception as e:
        elapsed_time = time.time() - start_time
        logger.error(f"[{request_id}] REQUEST FAILED - Time taken: {elapsed_time:.3f}s - Error: {str(e)}")
        raise HTTPException(status_code=500, detail="Analysis failed")

    elapsed_time = time.time() - start_time
    logger.info(
        f"[{request_id}] REQUEST COMPLETED - Time taken: {elapsed_time:.3f}s - "
        f"Total: {summary.total_count}, within limit: {summary.within_limit}"
    )

    return AnalyzeResponse(
        success=True,
        summary=summary,
        model=getattr(provider, "model", None),
    )


def main():
    """Run the server."""
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting Complexity Gate on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "backend:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
