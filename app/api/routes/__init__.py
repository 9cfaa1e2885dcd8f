"""API routes."""

from fastapi import APIRouter

from app.api.routes import bots, menus, responses, triggers, whatsapp_contacts, zapi_webhooks

api_router = APIRouter()

# Public routes (no auth required)
api_router.include_router(zapi_webhooks.router, prefix="/webhooks", tags=["zapi-webhooks"])

# Protected routes (auth required)
api_router.include_router(bots.router, tags=["whatsapp-bots"])
api_router.include_router(triggers.router, tags=["whatsapp-triggers"])
api_router.include_router(responses.router, tags=["whatsapp-responses"])
api_router.include_router(menus.router, tags=["whatsapp-menus"])
api_router.include_router(whatsapp_contacts.router, tags=["whatsapp-contacts"])
