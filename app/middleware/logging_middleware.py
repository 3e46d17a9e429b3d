import time
import json
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import structlog
from uuid import uuid4

logger = structlog.get_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        start_time = time.time()

        log_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        }

        if request.query_params:
            log_data["query_params"] = dict(request.query_params)

        # Product bodies are two scalar fields, so they are logged flat
        if request.method in ["POST", "PUT", "DELETE"]:
            body = await request.body()
            if body:
                try:
                    body_data = json.loads(body.decode())
                except (json.JSONDecodeError, UnicodeDecodeError):
                    log_data["body"] = body.decode(errors="replace")[:200]
                else:
                    if isinstance(body_data, dict):
                        for key, value in body_data.items():
                            log_data[f"body_{key}"] = str(value)[:100]
                    else:
                        log_data["body"] = str(body_data)[:200]

        logger.info("API Request Started", **log_data)

        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "API Request Failed",
                request_id=request_id,
                path=request.url.path,
                method=request.method,
                error=str(e),
                process_time=round(time.time() - start_time, 4)
            )
            raise

        response_log_data = {
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "process_time": round(time.time() - start_time, 4),
        }

        if response.status_code >= 400:
            logger.warning("API Request Completed with Error", **response_log_data)
        else:
            logger.info("API Request Completed Successfully", **response_log_data)

        response.headers["X-Request-ID"] = request_id
        return response
