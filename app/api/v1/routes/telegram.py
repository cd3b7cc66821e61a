from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from api.dependencies.rate_limits import get_limiter
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import TelegramWebhookHandlerDep
from infrastructure.telegram.webhook import SECRET_HEADER

logger = get_module_logger()
router = APIRouter(tags=["Telegram"])
limiter = get_limiter()


@router.post("/webhook/telegram")
@limiter.limit("120/minute")
async def telegram_webhook(request: Request, handler: TelegramWebhookHandlerDep):
    """Receive Telegram Bot API updates.

    Button clicks (callback_query) and text messages are turned into events
    for the application's listeners; every other update is acknowledged.

    Returns:
        JSONResponse: ``{"ok": true}``, or an error body with status 400
        (malformed update) or 401 (secret token mismatch).
    """
    if not handler.verify_secret(request.headers.get(SECRET_HEADER)):
        logger.warning("telegram_webhook_invalid_secret")
        return JSONResponse(status_code=401, content={"error": "Unauthorized"})

    update: Optional[Any]
    try:
        update = await request.json()
    except ValueError:
        update = None

    update_id = update.get("update_id") if isinstance(update, dict) else None
    with bind_request_context(
        request_path=request.url.path,
        request_method=request.method,
        telegram_update_id=update_id,
    ):
        response = await run_in_threadpool(handler.handle_update, update)

    return JSONResponse(status_code=response.status_code, content=response.body)
