"""Concrete repository implementation for VideoCase backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from case_library.application.interfaces import CaseRepository
from case_library.domain.entities import VideoCase
from case_library.domain.exceptions import EntityNotFoundError
from case_library.domain.keywords import join_keywords, parse_keywords
from case_library.infrastructure.database.models import VideoCaseModel


class SQLAlchemyCaseRepository(CaseRepository):
    """Implements the CaseRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: VideoCaseModel) -> VideoCase:
        """Map ORM model → domain entity."""
        return VideoCase(
            id=model.id,
            category=model.category,
            subcategory=model.subcategory,
            region=model.region,
            robot_type=model.robot_type,
            client_name=model.client_name,
            video_url=model.video_url,
            rating=model.rating,
            keywords=parse_keywords(model.keywords),
            description=model.description,
        )

    def _to_model(self, entity: VideoCase) -> VideoCaseModel:
        """Map domain entity → ORM model (for creation)."""
        return VideoCaseModel(
            id=entity.id,
            category=entity.category,
            subcategory=entity.subcategory,
            region=entity.region,
            robot_type=entity.robot_type,
            client_name=entity.client_name,
            video_url=entity.video_url,
            rating=entity.rating,
            keywords=join_keywords(entity.keywords),
            description=entity.description,
        )

    async def get_by_id(self, case_id: str) -> VideoCase | None:
        result = await self._session.get(VideoCaseModel, case_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[VideoCase]:
        stmt = select(VideoCaseModel).order_by(
            VideoCaseModel.created_at.asc(), VideoCaseModel.id.asc()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, case: VideoCase) -> VideoCase:
        model = self._to_model(case)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, case: VideoCase) -> VideoCase:
        model = await self._session.get(VideoCaseModel, case.id)
        if model is None:
            raise EntityNotFoundError("VideoCase", case.id)
        model.category = case.category
        model.subcategory = case.subcategory
        model.region = case.region
        model.robot_type = case.robot_type
        model.client_name = case.client_name
        model.video_url = case.video_url
        model.rating = case.rating
        model.keywords = join_keywords(case.keywords)
        model.description = case.description
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, case_id: str) -> bool:
        model = await self._session.get(VideoCaseModel, case_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
