"""Tenant context for log correlation and tenant isolation."""

from contextvars import ContextVar
from uuid import UUID

# Enterprise of the authenticated profile (CRUD routes)
tenant_id_var: ContextVar[UUID | None] = ContextVar("tenant_id", default=None)

# Bot resolved for the message unit being processed (webhook path)
bot_id_var: ContextVar[UUID | None] = ContextVar("bot_id", default=None)


def set_tenant_context(tenant_id: UUID | None) -> None:
    """Set the current tenant context.

    Args:
        tenant_id: Enterprise ID to set in context
    """
    tenant_id_var.set(tenant_id)


def get_tenant_context() -> UUID | None:
    """Get the current tenant context.

    Returns:
        Current enterprise ID or None
    """
    return tenant_id_var.get()


def set_bot_context(bot_id: UUID | None) -> None:
    """Set the bot being served by the current task."""
    bot_id_var.set(bot_id)


def get_bot_context() -> UUID | None:
    return bot_id_var.get()
