"""Request Dependencies — the logger → auth → handler pipeline as FastAPI stages.

Invariants:
    - log_request never rejects and never mutates request state
    - verify_token either sets request.state.user to the decoded claim or raises
      an AuthError; the handler is not invoked on failure
    - Missing cookie → MissingTokenError; bad/expired token → InvalidTokenError
    - Path ids reach handlers as ObjectId or not at all (InvalidIdentifierError)

Design Decisions:
    - Stages are plain dependencies composed per route with Depends(), ordered by
      listing log_request in the route's `dependencies` before handler params
"""

import logging

from bson import ObjectId
from fastapi import Cookie, Depends, Request

from car_doctor.config import Settings
from car_doctor.core import session_token
from car_doctor.core.errors import MissingTokenError
from car_doctor.core.identifiers import parse_object_id
from car_doctor.infrastructure.database import MongoManager, get_db
from car_doctor.services.catalog import ServiceCatalog
from car_doctor.services.orders import OrderBook

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def log_request(request: Request) -> None:
    """Record method/host/path of the incoming call."""
    logger.info(
        f"Called: {request.method} {request.url.hostname} {request.url.path}",
        extra={
            "method": request.method,
            "host": request.url.hostname,
            "path": request.url.path,
        },
    )


async def verify_token(
    request: Request,
    token: str | None = Cookie(default=None),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    """Gate for protected routes. Returns the identity claim."""
    if not token:
        raise MissingTokenError()
    claim = session_token.verify_token(token, settings.access_token_secret)
    logger.debug(f"Token verified for {claim.get('email')}")
    request.state.user = claim
    return claim


def document_id(id: str) -> ObjectId:
    """Parse the `{id}` path parameter."""
    return parse_object_id(id)


def get_catalog(db: MongoManager = Depends(get_db)) -> ServiceCatalog:
    return ServiceCatalog(db)


def get_orders(db: MongoManager = Depends(get_db)) -> OrderBook:
    return OrderBook(db)
