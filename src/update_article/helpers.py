"""Helper functions for update_article."""

from __future__ import annotations

from typing import Any

from articles.errors import InvalidRequest
from articles.models import AdvanceStatus, ArticleStatus, ArticleUpdate, SetNextReadDate, SetStatus
from common.datetime import parse_datetime


def parse_update_request(payload: Any) -> ArticleUpdate:
    '''Decode an update body.

    Accepted forms:
        {"Status": "Repetition1"}
        {"NextReadDate": "2024-01-01T12:00:00.000Z"}
        "Advance" or {"Advance": null}
    '''

    if payload == "Advance":
        return AdvanceStatus()
    if not isinstance(payload, dict) or len(payload) != 1:
        raise InvalidRequest("Update body must contain exactly one of Status, NextReadDate or Advance")

    key, value = next(iter(payload.items()))
    if key == "Advance":
        return AdvanceStatus()
    if key == "Status":
        return SetStatus(ArticleStatus.parse(value))
    if key == "NextReadDate":
        if not isinstance(value, str):
            raise InvalidRequest("NextReadDate must be an RFC 3339 timestamp")
        try:
            return SetNextReadDate(parse_datetime(value))
        except ValueError as exc:
            raise InvalidRequest(f"NextReadDate must be an RFC 3339 timestamp, got {value!r}") from exc
    raise InvalidRequest(f"Unknown update method: {key}")
