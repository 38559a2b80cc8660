"""POST /api/messages — plugin messages that create shapes on the page."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.dependencies import get_handler
from app.engine.errors import ShapeError
from app.models.requests import PluginMessage
from app.models.responses import ErrorResponse, MessageResult
from app.scene.handler import MessageHandler

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/messages",
    response_model=MessageResult,
    responses={422: {"model": ErrorResponse}},
)
async def post_message(
    msg: PluginMessage,
    handler: MessageHandler = Depends(get_handler),
):
    try:
        return await handler.handle(msg)
    except ShapeError as e:
        logger.warning("Message %s rejected: %s", msg.type, e)
        return JSONResponse(status_code=422, content=e.to_dict())
    except ValidationError as e:
        logger.warning("Message %s has an invalid config: %s", msg.type, e)
        first = e.errors()[0] if e.errors() else {}
        body = ErrorResponse(
            error="invalid_config",
            field=".".join(str(p) for p in first.get("loc", ())) or None,
            value=first.get("input"),
            message=str(first.get("msg", e)),
        )
        return JSONResponse(status_code=422, content=body.model_dump(mode="json"))
