"""
NZWalks Backend — Service Unit Tests
=====================================

What:  Orchestration logic of the three services against AsyncMock
       repositories (no storage involved).

What we test:
    ✅ Not-found rows become NotFoundError (with or without public detail)
    ✅ Writes are mapped to domain objects before reaching the repository
    ✅ Failed validation never reaches the write
"""

import uuid

import pytest

from nzwalks.exceptions import NotFoundError, ValidationError
from nzwalks.models import Region, Walk, WalkDifficulty
from nzwalks.schemas import (
    AddRegionRequest,
    AddWalkDifficultyRequest,
    AddWalkRequest,
    UpdateRegionRequest,
    UpdateWalkRequest,
)
from nzwalks.services.region_service import RegionService
from nzwalks.services.walk_difficulty_service import WalkDifficultyService
from nzwalks.services.walk_service import WALK_NOT_FOUND, WalkService


def stored_region(**overrides) -> Region:
    values = dict(id=uuid.uuid4(), code="CAN", name="Canterbury", area=44508.0,
                  latitude=-43.53, longitude=172.63, population=655000)
    values.update(overrides)
    return Region(**values)


class TestRegionService:

    def setup_method(self):
        self.service = RegionService()

    @pytest.mark.asyncio
    async def test_list_regions_maps_every_row(self, mock_repositories):
        rows = [stored_region(), stored_region(code="OTA", name="Otago")]
        mock_repositories.regions.get_all.return_value = rows

        result = await self.service.list_regions(mock_repositories)

        assert [r.code for r in result] == ["CAN", "OTA"]

    @pytest.mark.asyncio
    async def test_get_region_not_found_has_no_detail(self, mock_repositories):
        mock_repositories.regions.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_region(mock_repositories, uuid.uuid4())

        assert exc_info.value.detail is None

    @pytest.mark.asyncio
    async def test_add_region_passes_unsaved_domain_object(self, mock_repositories):
        async def assign_id(region):
            region.id = uuid.uuid4()
            return region

        mock_repositories.regions.add.side_effect = assign_id
        request = AddRegionRequest(code="CAN", name="Canterbury", area=44508, latitude=-43.53,
                                   longitude=172.63, population=655000)

        result = await self.service.add_region(mock_repositories, request)

        sent = mock_repositories.regions.add.await_args.args[0]
        assert isinstance(sent, Region)
        assert result.id == sent.id
        assert result.name == "Canterbury"

    @pytest.mark.asyncio
    async def test_add_region_invalid_does_not_write(self, mock_repositories):
        request = AddRegionRequest(code="", name="", area=1, latitude=0, longitude=0, population=0)

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_region(mock_repositories, request)

        assert set(exc_info.value.errors) == {"code", "name"}
        mock_repositories.regions.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_region_missing_row(self, mock_repositories):
        mock_repositories.regions.update.return_value = None
        request = UpdateRegionRequest(code="CAN", name="Canterbury", area=1, latitude=0,
                                      longitude=0, population=1)

        with pytest.raises(NotFoundError):
            await self.service.update_region(mock_repositories, uuid.uuid4(), request)

    @pytest.mark.asyncio
    async def test_delete_region_returns_deleted_row(self, mock_repositories):
        region = stored_region()
        mock_repositories.regions.delete.return_value = region

        result = await self.service.delete_region(mock_repositories, region.id)

        assert result.id == region.id
        mock_repositories.regions.delete.assert_awaited_once_with(region.id)


class TestWalkService:

    def setup_method(self):
        self.service = WalkService()

    def walk_request(self, **overrides):
        values = dict(name="Milford Track", length=53.5,
                      region_id=uuid.uuid4(), walk_difficulty_id=uuid.uuid4())
        values.update(overrides)
        return values

    @pytest.mark.asyncio
    async def test_add_walk_validates_references_then_writes(self, mock_repositories):
        mock_repositories.regions.get_by_id.return_value = stored_region()
        mock_repositories.walk_difficulties.get_by_id.return_value = WalkDifficulty(
            id=uuid.uuid4(), code="Medium"
        )

        async def assign_id(walk):
            walk.id = uuid.uuid4()
            return walk

        mock_repositories.walks.add.side_effect = assign_id
        request = AddWalkRequest(**self.walk_request())

        result = await self.service.add_walk(mock_repositories, request)

        assert result.name == "Milford Track"
        assert result.region_id == request.region_id
        mock_repositories.regions.get_by_id.assert_awaited_once_with(request.region_id)
        mock_repositories.walk_difficulties.get_by_id.assert_awaited_once_with(
            request.walk_difficulty_id
        )

    @pytest.mark.asyncio
    async def test_add_walk_with_unknown_region_is_rejected(self, mock_repositories):
        mock_repositories.regions.get_by_id.return_value = None
        mock_repositories.walk_difficulties.get_by_id.return_value = WalkDifficulty(
            id=uuid.uuid4(), code="Medium"
        )

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_walk(mock_repositories, AddWalkRequest(**self.walk_request()))

        assert exc_info.value.errors == {"regionId": ["RegionId is invalid."]}
        mock_repositories.walks.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_walk_missing_row_has_public_detail(self, mock_repositories):
        mock_repositories.regions.get_by_id.return_value = stored_region()
        mock_repositories.walk_difficulties.get_by_id.return_value = WalkDifficulty(
            id=uuid.uuid4(), code="Medium"
        )
        mock_repositories.walks.update.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.update_walk(
                mock_repositories, uuid.uuid4(), UpdateWalkRequest(**self.walk_request())
            )

        assert exc_info.value.detail == WALK_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_walk_missing_row_has_public_detail(self, mock_repositories):
        mock_repositories.walks.delete.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.delete_walk(mock_repositories, uuid.uuid4())

        assert exc_info.value.detail == WALK_NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_walk_maps_row(self, mock_repositories):
        walk = Walk(id=uuid.uuid4(), name="Kepler Track", length=60.0,
                    region_id=uuid.uuid4(), walk_difficulty_id=uuid.uuid4())
        mock_repositories.walks.get_by_id.return_value = walk

        result = await self.service.get_walk(mock_repositories, walk.id)

        assert result.id == walk.id
        assert result.walk_difficulty_id == walk.walk_difficulty_id


class TestWalkDifficultyService:

    def setup_method(self):
        self.service = WalkDifficultyService()

    @pytest.mark.asyncio
    async def test_add_duplicate_code_is_rejected(self, mock_repositories):
        mock_repositories.walk_difficulties.get_by_code.return_value = WalkDifficulty(
            id=uuid.uuid4(), code="Easy"
        )

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_walk_difficulty(
                mock_repositories, AddWalkDifficultyRequest(code="Easy")
            )

        assert exc_info.value.errors == {"code": ["Code already exists."]}
        mock_repositories.walk_difficulties.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_difficulty(self, mock_repositories):
        mock_repositories.walk_difficulties.delete.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.delete_walk_difficulty(mock_repositories, uuid.uuid4())

        assert exc_info.value.detail is None
