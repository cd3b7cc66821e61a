from fastapi import APIRouter
from api.v1.routes.telegram import router as telegram_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(telegram_router)

# Unversioned router for endpoints whose URL is registered with a provider
# (Telegram setWebhook points at /webhook/telegram)
legacy_router = APIRouter()
legacy_router.include_router(telegram_router)
