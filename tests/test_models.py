"""Tests for the DONKI record models and target profiles."""

from datetime import datetime, timezone

from spacedatahub.models import TARGET_PROFILES, EventRecord, ImpactVerdict, TargetBody
from spacedatahub.models.donki import parse_events


class TestEventRecord:

    def test_parses_provider_payload(self):
        record = EventRecord.model_validate({
            "startTime": "2024-05-10T06:12Z",
            "note": "Halo CME",
            "link": "https://kauai.ccmc.gsfc.nasa.gov/DONKI/view/CME/30000/-1",
            "cmeAnalyses": [
                {"speed": 1200, "impacts": [
                    {"location": "L1", "estimatedTimeOfArrival": "2024-05-11T18:00Z", "isGltf": True},
                ]},
                {"speed": 900},
            ],
        })
        assert record.start_time == datetime(2024, 5, 10, 6, 12, tzinfo=timezone.utc)
        assert record.primary_analysis.speed == 1200
        impact = record.primary_analysis.impacts[0]
        assert impact.location == "L1"
        assert impact.is_gltf is True
        assert impact.estimated_time_of_arrival == datetime(2024, 5, 11, 18, 0, tzinfo=timezone.utc)

    def test_everything_optional(self):
        record = EventRecord.model_validate({})
        assert record.start_time is None
        assert record.note is None
        assert record.primary_analysis is None

    def test_null_gltf_flag_is_false(self):
        record = EventRecord.model_validate({"cmeAnalyses": [{"impacts": [{"location": "Mars", "isGltf": None}]}]})
        assert record.primary_analysis.impacts[0].is_gltf is False

    def test_numeric_string_speed(self):
        record = EventRecord.model_validate({"cmeAnalyses": [{"speed": "850.5"}]})
        assert record.primary_analysis.speed == 850.5

    def test_numeric_junk_speed_is_none(self):
        for junk in ("nan", "inf", "-inf", float("nan")):
            record = EventRecord.model_validate({"cmeAnalyses": [{"speed": junk}]})
            assert record.primary_analysis.speed is None

    def test_bad_impact_does_not_spoil_siblings(self):
        record = EventRecord.model_validate({"cmeAnalyses": [{"impacts": [
            {"location": 7},
            "n/a",
            {"location": "L1", "estimatedTimeOfArrival": "2024-05-11T18:00Z", "isGltf": True},
        ]}]})
        impacts = record.primary_analysis.impacts
        assert [i.location for i in impacts] == ["L1"]

    def test_only_first_analysis_is_parsed(self):
        record = EventRecord.model_validate({"cmeAnalyses": [{"speed": 600}, {"impacts": "n/a"}, "junk"]})
        assert record.primary_analysis.speed == 600

    def test_malformed_first_analysis(self):
        assert EventRecord.model_validate({"cmeAnalyses": ["junk"]}).primary_analysis is None
        assert EventRecord.model_validate({"cmeAnalyses": {"speed": 1}}).primary_analysis is None

    def test_parse_events_drops_non_records(self):
        events = parse_events([{"note": "ok"}, None, 7, {"cmeAnalyses": {"speed": 1}}])
        assert [e.note for e in events] == ["ok", None]


class TestTargets:

    def test_profiles(self):
        assert TARGET_PROFILES[TargetBody.MOON].location_token == "L1"
        assert TARGET_PROFILES[TargetBody.MOON].reference_distance_km == 150_000_000
        assert TARGET_PROFILES[TargetBody.MARS].location_token == "Mars"
        assert TARGET_PROFILES[TargetBody.MARS].reference_distance_km == 225_000_000

    def test_every_target_has_profile(self):
        assert set(TARGET_PROFILES) == set(TargetBody)


class TestImpactVerdict:

    def test_negative(self):
        verdict = ImpactVerdict.negative("nothing")
        assert verdict.is_impact is False
        assert verdict.summary == "nothing"
        assert verdict.arrival_time is None
        assert verdict.analysis_kind is None
