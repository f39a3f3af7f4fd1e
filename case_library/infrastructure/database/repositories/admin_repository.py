"""Concrete repository implementation for AdminUser backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from case_library.application.interfaces import AdminRepository
from case_library.domain.entities import AdminUser, normalize_email
from case_library.infrastructure.database.models import AdminUserModel


class SQLAlchemyAdminRepository(AdminRepository):
    """Implements the AdminRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AdminUserModel) -> AdminUser:
        return AdminUser(
            email=model.email,
            added_by=model.added_by,
            added_at=model.added_at,
        )

    async def _get_model(self, email: str) -> AdminUserModel | None:
        stmt = select(AdminUserModel).where(
            AdminUserModel.email_key == normalize_email(email)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[AdminUser]:
        stmt = select(AdminUserModel).order_by(AdminUserModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_email(self, email: str) -> AdminUser | None:
        model = await self._get_model(email)
        return self._to_entity(model) if model else None

    async def add(self, admin: AdminUser) -> AdminUser:
        model = AdminUserModel(
            email=admin.email,
            email_key=normalize_email(admin.email),
            added_by=admin.added_by,
            added_at=admin.added_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_email(self, email: str) -> bool:
        model = await self._get_model(email)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
