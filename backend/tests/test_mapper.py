"""
NZWalks Backend — Mapper Unit Tests
====================================

What we test:
    ✅ Domain → response copies every field, camelCase on the wire
    ✅ Request → domain leaves the id for the repository to assign
    ✅ Domain → response → domain preserves every shared field
    ✅ Explicit field correspondence
    ✅ Broken profiles fail at registration, not at map time
"""

import uuid

import pytest
from pydantic import BaseModel

from nzwalks.exceptions import MappingConfigurationError
from nzwalks.mapper import Mapper, mapper
from nzwalks.models import Region, Walk, WalkDifficulty
from nzwalks.schemas import (
    AddRegionRequest,
    AddWalkRequest,
    RegionResponse,
    WalkDifficultyResponse,
    WalkResponse,
)


def make_region() -> Region:
    return Region(
        id=uuid.uuid4(),
        code="WGN",
        name="Wellington",
        area=8049.0,
        latitude=-41.28,
        longitude=174.77,
        population=543500,
    )


class TestProfiles:

    def test_region_to_response_copies_all_fields(self):
        region = make_region()

        dto = mapper.map(region, RegionResponse)

        assert dto.id == region.id
        assert dto.code == "WGN"
        assert dto.name == "Wellington"
        assert dto.area == 8049.0
        assert dto.latitude == -41.28
        assert dto.longitude == 174.77
        assert dto.population == 543500

    def test_walk_response_serializes_camel_case(self):
        walk = Walk(
            id=uuid.uuid4(),
            name="Tongariro Alpine Crossing",
            length=19.4,
            region_id=uuid.uuid4(),
            walk_difficulty_id=uuid.uuid4(),
        )

        body = mapper.map(walk, WalkResponse).model_dump(by_alias=True, mode="json")

        assert body["regionId"] == str(walk.region_id)
        assert body["walkDifficultyId"] == str(walk.walk_difficulty_id)
        assert "region_id" not in body

    def test_add_request_leaves_id_unset(self):
        request = AddRegionRequest(
            code="NSN", name="Nelson", area=445.0, latitude=-41.27, longitude=173.28, population=54500
        )

        region = mapper.map(request, Region)

        assert isinstance(region, Region)
        assert region.id is None
        assert region.code == "NSN"
        assert region.population == 54500

    def test_add_walk_request_accepts_camel_case_input(self):
        region_id, difficulty_id = uuid.uuid4(), uuid.uuid4()
        request = AddWalkRequest.model_validate(
            {"name": "Abel Tasman Coast Track", "length": 60, "regionId": str(region_id),
             "walkDifficultyId": str(difficulty_id)}
        )

        walk = mapper.map(request, Walk)

        assert walk.region_id == region_id
        assert walk.walk_difficulty_id == difficulty_id
        assert walk.length == 60

    def test_round_trip_preserves_shared_fields(self):
        region = make_region()

        back = mapper.map(mapper.map(region, RegionResponse), Region)

        for field in ("id", "code", "name", "area", "latitude", "longitude", "population"):
            assert getattr(back, field) == getattr(region, field)

    def test_walk_difficulty_round_trip(self):
        difficulty = WalkDifficulty(id=uuid.uuid4(), code="Hard")

        back = mapper.map(mapper.map(difficulty, WalkDifficultyResponse), WalkDifficulty)

        assert back.id == difficulty.id
        assert back.code == "Hard"

    def test_map_many_keeps_order(self):
        regions = [make_region(), make_region()]

        dtos = mapper.map_many(regions, RegionResponse)

        assert [d.id for d in dtos] == [r.id for r in regions]


class Track(BaseModel):
    title: str
    distance: float


class TrackSummary(BaseModel):
    name: str
    distance: float


class TrackLabel(BaseModel):
    title: int


class TestConfiguration:

    def test_explicit_field_correspondence(self):
        m = Mapper()
        m.register(Track, TrackSummary, fields={"name": "title"})

        summary = m.map(Track(title="Routeburn", distance=32.0), TrackSummary)

        assert summary.name == "Routeburn"
        assert summary.distance == 32.0

    def test_missing_source_field_fails_at_registration(self):
        m = Mapper()
        with pytest.raises(MappingConfigurationError, match="no source field for 'name'"):
            m.register(Track, TrackSummary)

    def test_type_mismatch_fails_at_registration(self):
        m = Mapper()
        with pytest.raises(MappingConfigurationError, match="type mismatch"):
            m.register(Track, TrackLabel)

    def test_unknown_ignored_field_fails_at_registration(self):
        m = Mapper()
        with pytest.raises(MappingConfigurationError, match="unknown destination fields"):
            m.register(TrackSummary, TrackSummary, ignore=("colour",))

    def test_unregistered_pair_raises(self):
        m = Mapper()
        with pytest.raises(MappingConfigurationError, match="No mapping registered"):
            m.map(Track(title="Kepler", distance=60.0), TrackSummary)
