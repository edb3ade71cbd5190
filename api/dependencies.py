"""
FastAPI dependencies for dependency injection.

Provides the resolved configuration and token authentication to route handlers.
"""

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request

from core.config import Conf
from core.logging import get_logger


logger = get_logger(__name__)

# Global singleton (set by create_app, read-only afterwards)
_conf: Optional[Conf] = None


def set_conf(conf: Conf) -> None:
    """Set the global resolved configuration."""
    global _conf
    _conf = conf


async def get_conf() -> Conf:
    """
    Dependency that provides the resolved configuration.

    Usage:
        @router.get("/info")
        async def info(conf: Conf = Depends(get_conf)):
            ...
    """
    if _conf is None:
        raise RuntimeError("Configuration not loaded")
    return _conf


async def require_auth_token(request: Request, conf: Conf = Depends(get_conf)) -> None:
    """
    Accept only requests carrying one of the configured tokens.

    The token is read from the header named by authHeaderName. With no
    header name or no tokens configured, every request is rejected.
    """
    token = request.headers.get(conf.auth_header_name) if conf.auth_header_name else None
    if token and any(secrets.compare_digest(token, t) for t in conf.auth_tokens):
        return
    logger.warning(
        "Unauthorized request",
        path=request.url.path,
        header=conf.auth_header_name,
    )
    raise HTTPException(status_code=401, detail="Unauthorized")
