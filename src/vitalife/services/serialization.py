"""JSON encoding of stored profile and log values."""

import logging
from datetime import date

from pydantic import TypeAdapter, ValidationError

from vitalife.domain.models import DailyLog, UserProfile

logger = logging.getLogger(__name__)

_PROFILE_ADAPTER = TypeAdapter(UserProfile | None)
_LOGS_ADAPTER = TypeAdapter(dict[str, DailyLog])


def dump_profile(profile: UserProfile | None) -> str:
    """Encode a profile (or its absence) as JSON."""
    return _PROFILE_ADAPTER.dump_json(profile).decode("utf-8")


def load_profile(raw: str | None) -> UserProfile | None:
    """Decode a stored profile, treating unusable values as absent."""
    if raw is None:
        return None
    try:
        return _PROFILE_ADAPTER.validate_json(raw)
    except ValidationError:
        logger.warning("Discarding unreadable stored profile")
        return None


def dump_logs(logs: dict[str, DailyLog]) -> str:
    """Encode the date-to-log mapping as JSON."""
    return _LOGS_ADAPTER.dump_json(logs).decode("utf-8")


def load_logs(raw: str | None) -> dict[str, DailyLog]:
    """Decode stored logs, treating unusable values as an empty mapping."""
    if raw is None:
        return {}
    try:
        logs = _LOGS_ADAPTER.validate_json(raw)
    except ValidationError:
        logger.warning("Discarding unreadable stored logs")
        return {}
    if not all(_is_log_key(key, log) for key, log in logs.items()):
        logger.warning("Discarding stored logs with mismatched date keys")
        return {}
    return logs


def _is_log_key(key: str, log: DailyLog) -> bool:
    try:
        canonical = date.fromisoformat(key).isoformat()
    except ValueError:
        return False
    return key == canonical == log.date
