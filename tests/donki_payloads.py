"""Builders for DONKI-shaped payloads used across the tests."""

from datetime import datetime, timezone

NOW = datetime(2024, 5, 10, 0, 0, tzinfo=timezone.utc)


def donki_time(dt: datetime) -> str:
    """Format like DONKI does, e.g. 2024-05-10T12:00Z."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%MZ")


def impact(location, eta, is_gltf=True):
    return {"location": location, "estimatedTimeOfArrival": donki_time(eta), "isGltf": is_gltf}


def event(start=None, note=None, link=None, speed=None, impacts=None, analyses=None):
    record = {}
    if start is not None:
        record["startTime"] = donki_time(start)
    if note is not None:
        record["note"] = note
    if link is not None:
        record["link"] = link
    if analyses is not None:
        record["cmeAnalyses"] = analyses
    elif speed is not None or impacts is not None:
        analysis = {"speed": speed}
        if impacts is not None:
            analysis["impacts"] = impacts
        record["cmeAnalyses"] = [analysis]
    return record
