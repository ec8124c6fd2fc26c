"""
Factorial Provider Service - HTTP-интерфейс к вычислению факториалов

Эндпоинты:
1. POST /factorial     - n! в формате float64
2. POST /factorial_ln  - ln(n!)
3. GET  /health        - состояние кэша факториалов
4. GET  /metrics       - метрики Prometheus
"""

import math
import os
import time
from contextlib import asynccontextmanager
from typing import Callable

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from logging_config import setup_logging, env_enabled

from .exceptions import ArgumentOutOfRangeError
from .factorial_provider import FactorialProvider
from .models import FactorialRequest, FactorialResponse, HealthResponse

# ============================================================================
# CONFIGURATION
# ============================================================================

HOST = os.getenv("FACTORIAL_HOST", "0.0.0.0")
PORT = int(os.getenv("FACTORIAL_PORT", "8000"))
EAGER_CACHE = env_enabled("FACTORIAL_EAGER_CACHE", True)

logger = setup_logging("factorial_provider")

# ============================================================================
# PROMETHEUS METRICS
# ============================================================================

FACTORIAL_REQUESTS_TOTAL = Counter(
    'factorial_requests_total', 'Total factorial requests', ['function', 'status'])
FACTORIAL_REQUEST_DURATION_SECONDS = Histogram(
    'factorial_request_duration_seconds', 'Factorial computation duration', ['function'])


@asynccontextmanager
async def lifespan(app: FastAPI):
    if EAGER_CACHE:
        FactorialProvider.warm_up()
        logger.info("Factorial cache warmed up")
    yield


app = FastAPI(
    title="Factorial Provider",
    description="API for double-precision factorials and log-factorials",
    lifespan=lifespan,
)

provider = FactorialProvider()


def _compute(function: str, compute: Callable[[int], float], n: int) -> FactorialResponse:
    start = time.time()
    try:
        value = compute(n)
    except ArgumentOutOfRangeError as e:
        FACTORIAL_REQUESTS_TOTAL.labels(function=function, status="invalid").inc()
        logger.warning(f"Rejected {function}({n}): {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        FACTORIAL_REQUESTS_TOTAL.labels(function=function, status="error").inc()
        logger.error(f"Unexpected error in {function}({n}): {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    finally:
        FACTORIAL_REQUEST_DURATION_SECONDS.labels(function=function).observe(time.time() - start)

    FACTORIAL_REQUESTS_TOTAL.labels(function=function, status="ok").inc()
    if math.isinf(value):
        return FactorialResponse(n=n, function=function, value=None, is_infinite=True)
    return FactorialResponse(n=n, function=function, value=value)


@app.post("/factorial", response_model=FactorialResponse)
async def factorial_endpoint(request: FactorialRequest) -> FactorialResponse:
    """Эндпоинт для вычисления n! в формате float64.

    Args:
        request: Запрос с аргументом n.

    Returns:
        FactorialResponse: Результат; при n > 170 is_infinite=True.

    Raises:
        HTTPException: 400 если n отрицательное, 500 при прочих ошибках.
    """
    return _compute("factorial", provider.factorial, request.n)


@app.post("/factorial_ln", response_model=FactorialResponse)
async def factorial_ln_endpoint(request: FactorialRequest) -> FactorialResponse:
    """Эндпоинт для вычисления натурального логарифма n!."""
    return _compute("factorial_ln", provider.factorial_ln, request.n)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(cache_built=FactorialProvider.is_cache_built())


@app.get("/metrics")
async def metrics():
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
