"""Structured logging setup and the per-request access log."""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from agrismart.config import LogFormat, Settings, get_settings

REQUEST_ID_HEADER = "x-request-id"

# Client-supplied ids end up in every log line of the request.
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

_configured = False


def _renderer_for(log_format: LogFormat) -> Any:
	if log_format == LogFormat.json:
		return structlog.processors.JSONRenderer(ensure_ascii=False)
	return structlog.dev.ConsoleRenderer()


def configure_structured_logging(settings: Settings | None = None) -> None:
	"""Route stdlib and structlog output through one renderer; idempotent."""
	global _configured
	if _configured:
		return

	settings = settings or get_settings()
	log_level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)
	if settings.log_format == LogFormat.json:
		logging.basicConfig(level=log_level, format="%(message)s")
	else:
		logging.basicConfig(level=log_level)

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			_renderer_for(settings.log_format),
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


def resolve_request_id(header_value: str | None) -> str:
	"""Reuse a well-formed caller id, otherwise mint one."""
	if header_value and _REQUEST_ID_PATTERN.match(header_value):
		return header_value
	return uuid.uuid4().hex


def access_log_level(path: str, status_code: int, duration_ms: float, slow_ms: float) -> str:
	"""Log method name for one finished request."""
	if status_code >= 500:
		return "error"
	if status_code >= 400 or duration_ms > slow_ms:
		return "warning"
	if path.startswith("/health"):
		return "debug"
	return "info"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind request context for every log event and emit one access log line.

	``request_id``, ``method`` and ``path`` are bound into structlog's
	contextvars, so events logged by services during the request carry them.
	"""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
		request.state.request_id = request_id

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(
			request_id=request_id,
			method=request.method,
			path=request.url.path,
		)

		logger = structlog.get_logger("agrismart.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception as exc:
			logger.exception("http_request_failed", duration_ms=_elapsed_ms(start), error=str(exc))
			raise

		duration_ms = _elapsed_ms(start)
		response.headers[REQUEST_ID_HEADER] = request_id
		level = access_log_level(
			request.url.path,
			response.status_code,
			duration_ms,
			get_settings().slow_request_ms,
		)
		getattr(logger, level)(
			"http_request",
			query=request.url.query or None,
			status_code=response.status_code,
			duration_ms=duration_ms,
		)
		return response


def _elapsed_ms(start: float) -> float:
	return round((time.perf_counter() - start) * 1000.0, 2)
