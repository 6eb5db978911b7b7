import time
import json
import logging
import asyncio
from typing import Optional
from functools import wraps

logger = logging.getLogger("soroban.telemetry")


def emit_event(event: str, *, route: str, version: str, magnitude: Optional[str] = None,
               rows: Optional[int] = None, requested: Optional[int] = None,
               produced: Optional[int] = None, error_type: Optional[str] = None,
               latency_ms: Optional[int] = None, ok: Optional[bool] = None):
    payload = {
        "event": event,
        "route": route,
        "version": version,
        "magnitude": magnitude,
        "rows": rows,
        "requested": requested,
        "produced": produced,
        "error_type": error_type,
        "latency_ms": latency_ms,
        "ok": ok,
        "ts": time.time(),
    }
    # log as single-line JSON for easy parsing in prod
    logger.info("telemetry=%s", json.dumps(payload, separators=(",", ":")))


def _finish(route: str, version: str, t0: float, err: Optional[str]) -> None:
    dt = int((time.time() - t0) * 1000)
    emit_event("api_call", route=route, version=version, latency_ms=dt, ok=err is None,
               error_type=err)


def instrument(route: str, version: str):
    """Emit an ``api_call`` event with latency and outcome around a route handler."""
    def deco(fn):
        if asyncio.iscoroutinefunction(fn):
            @wraps(fn)
            async def wrapped_async(*args, **kwargs):
                t0 = time.time()
                err = None
                try:
                    return await fn(*args, **kwargs)
                except Exception as e:
                    err = e.__class__.__name__
                    raise
                finally:
                    _finish(route, version, t0, err)
            return wrapped_async

        @wraps(fn)
        def wrapped(*args, **kwargs):
            t0 = time.time()
            err = None
            try:
                return fn(*args, **kwargs)
            except Exception as e:
                err = e.__class__.__name__
                raise
            finally:
                _finish(route, version, t0, err)
        return wrapped
    return deco
