"""Project repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.project import Project
from app.persistence.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entities, scoped by enterprise."""

    scope_column = "enterprise_id"

    def __init__(self, session: AsyncSession):
        """Initialize project repository."""
        super().__init__(Project, session)
