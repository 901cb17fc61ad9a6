# ============================================================================
# File: api/middleware.py
# ============================================================================

import time
import uuid
import logging
from fastapi import Request
from starlette.background import BackgroundTask
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from core.cache import cache_key, is_cacheable, store_response

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Content-Type": "application/json",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Injects:
    - request_id
    - api_latency_ms
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.perf_counter()

        request.state.request_id = request_id

        response: Response = await call_next(request)

        latency_ms = int((time.perf_counter() - start_time) * 1000)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-API-Latency-ms"] = str(latency_ms)

        logger.info(
            f"[{request_id}] {request.method} {request.url.path} -> "
            f"{response.status_code} ({latency_ms}ms)"
        )

        return response


class EdgeMiddleware(BaseHTTPMiddleware):
    """
    Edge behaviour shared by every route:
    - OPTIONS short-circuits to an empty 200
    - cache-eligible GETs are answered from the edge cache when possible
    - successful eligible responses are stored after they are sent
    - permissive CORS headers on every response, cached or not
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        cache = getattr(request.app.state, "response_cache", None)
        key = None
        if cache is not None and is_cacheable(request.method, request.url.path):
            key = cache_key(request.method, str(request.url))
            cached = await cache.get(key)
            if cached is not None:
                logger.debug(f"Cache hit: {key}")
                return Response(content=cached.body, status_code=200, headers=CORS_HEADERS)

        response: Response = await call_next(request)

        if key is not None and response.status_code == 200:
            body = b"".join([chunk async for chunk in response.body_iterator])
            response = Response(
                content=body,
                status_code=response.status_code,
                headers=dict(response.headers),
                background=BackgroundTask(store_response, cache, key, body),
            )

        response.headers.update(CORS_HEADERS)
        return response
