"""Tests for articles.models module."""

from datetime import datetime, timedelta, timezone

import pytest

from articles.errors import InvalidRequest, StoreError
from articles.models import NO_AUTHOR, NO_TITLE, ArticleRecord, ArticleStatus, ParsedArticle
from common.ids import article_id_timestamp

ULID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestArticleStatusSchedule:
    @pytest.mark.parametrize(
        "status, weeks, next_status",
        [
            (ArticleStatus.NEW, 1, ArticleStatus.REPETITION1),
            (ArticleStatus.REPETITION1, 2, ArticleStatus.REPETITION2),
            (ArticleStatus.REPETITION2, 4, ArticleStatus.REPETITION3),
            (ArticleStatus.REPETITION3, 12, ArticleStatus.REPETITION4),
            (ArticleStatus.REPETITION4, 26, ArticleStatus.ARCHIVE),
            (ArticleStatus.ARCHIVE, 52, ArticleStatus.ARCHIVE),
        ],
    )
    def test_schedule_table(self, status, weeks, next_status) -> None:
        assert status.repeat_duration() == timedelta(weeks=weeks)
        assert status.next_status() is next_status

    @pytest.mark.parametrize("status", list(ArticleStatus))
    def test_every_status_reaches_archive_and_stays(self, status) -> None:
        for _ in range(len(ArticleStatus)):
            status = status.next_status()
        assert status is ArticleStatus.ARCHIVE
        assert status.next_status() is ArticleStatus.ARCHIVE

    def test_archive_has_longest_duration(self) -> None:
        durations = [status.repeat_duration() for status in ArticleStatus]
        assert ArticleStatus.ARCHIVE.repeat_duration() == max(durations) == timedelta(weeks=52)

    def test_transitions_only_move_forward(self) -> None:
        order = list(ArticleStatus)
        for status in order:
            assert order.index(status.next_status()) >= order.index(status)

    def test_can_move_to(self) -> None:
        assert ArticleStatus.NEW.can_move_to(ArticleStatus.ARCHIVE)
        assert ArticleStatus.REPETITION2.can_move_to(ArticleStatus.REPETITION2)
        assert not ArticleStatus.REPETITION2.can_move_to(ArticleStatus.REPETITION1)

    @pytest.mark.parametrize("target", list(ArticleStatus))
    def test_archive_only_moves_to_itself(self, target) -> None:
        assert ArticleStatus.ARCHIVE.can_move_to(target) is (target is ArticleStatus.ARCHIVE)


class TestArticleStatusParse:
    def test_parses_name(self) -> None:
        assert ArticleStatus.parse("Repetition3") is ArticleStatus.REPETITION3

    def test_case_insensitive(self) -> None:
        assert ArticleStatus.parse("archive") is ArticleStatus.ARCHIVE

    def test_unknown_raises(self) -> None:
        with pytest.raises(InvalidRequest):
            ArticleStatus.parse("Repetition5")

    def test_non_string_raises(self) -> None:
        with pytest.raises(InvalidRequest):
            ArticleStatus.parse(3)


class TestParsedArticle:
    def test_from_camel_case_response(self) -> None:
        parsed = ParsedArticle.from_response(
            {"title": "T", "byline": "A", "textContent": "text", "siteName": "Site", "length": 4}
        )
        assert parsed.title == "T"
        assert parsed.byline == "A"
        assert parsed.text_content == "text"
        assert parsed.site_name == "Site"
        assert parsed.length == 4

    def test_none_response(self) -> None:
        assert ParsedArticle.from_response(None) == ParsedArticle()

    def test_full_text_prefers_content(self) -> None:
        assert ParsedArticle(content="<p>html</p>", text_content="text").full_text == "<p>html</p>"

    def test_full_text_falls_back_to_text_content(self) -> None:
        assert ParsedArticle(content="  ", text_content="text").full_text == "text"

    def test_full_text_none_when_empty(self) -> None:
        assert ParsedArticle().full_text is None


class TestArticleRecordItems:
    def test_round_trip_through_item(self) -> None:
        record = ArticleRecord(
            id=ULID,
            title="Title",
            author="Author",
            source_url="https://example.com/a",
            content_location="s3://bucket/articles/a.html",
            summary="Summary",
            ingest_date=NOW,
            status=ArticleStatus.REPETITION2,
            next_read_date=NOW + timedelta(weeks=4),
        )
        item = record.to_item()
        assert item["ulid"] == ULID
        assert item["status"] == "Repetition2"
        assert item["next_read_date"] == "2024-01-29T12:00:00.000Z"
        assert ArticleRecord.from_item(item) == record

    def test_optional_fields_omitted_from_item(self) -> None:
        record = ArticleRecord(id=ULID, source_url="https://example.com", ingest_date=NOW, next_read_date=NOW)
        item = record.to_item()
        assert "content_location" not in item
        assert "summary" not in item


class TestArticleRecordLegacyItems:
    def test_minimal_item_gets_defaults(self) -> None:
        record = ArticleRecord.from_item({"ulid": ULID, "article_url": "https://example.com/old"})
        assert record.title == NO_TITLE
        assert record.author == NO_AUTHOR
        assert record.source_url == "https://example.com/old"
        assert record.status is ArticleStatus.NEW
        assert record.ingest_date == article_id_timestamp(ULID)
        assert record.next_read_date == record.ingest_date + timedelta(weeks=1)

    def test_json_quoted_status_and_date(self) -> None:
        record = ArticleRecord.from_item(
            {
                "ulid": ULID,
                "source_url": "https://example.com",
                "ingest_date": "2024-01-01T12:00:00Z",
                "status": '"Archive"',
                "next_read_date": '"2024-02-01T07:00:00-05:00"',
            }
        )
        assert record.status is ArticleStatus.ARCHIVE
        assert record.next_read_date == datetime(2024, 2, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_repeat_status_maps_to_first_repetition(self) -> None:
        record = ArticleRecord.from_item(
            {
                "ulid": ULID,
                "source_url": "https://example.com",
                "ingest_date": "2024-01-01T12:00:00Z",
                "status": '{"Repeat":"2024-01-15T12:00:00Z"}',
            }
        )
        assert record.status is ArticleStatus.REPETITION1
        assert record.next_read_date == datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def test_s3_archive_arn_used_as_content_location(self) -> None:
        record = ArticleRecord.from_item(
            {"ulid": ULID, "source_url": "https://example.com", "s3_archive_arn": "s3://bucket/key"}
        )
        assert record.content_location == "s3://bucket/key"

    def test_blank_title_gets_sentinel(self) -> None:
        record = ArticleRecord.from_item({"ulid": ULID, "source_url": "https://example.com", "title": ""})
        assert record.title == NO_TITLE

    @pytest.mark.parametrize(
        "item",
        [
            {"ulid": ULID, "source_url": "https://example.com", "next_read_date": "next tuesday"},
            {"ulid": ULID, "source_url": "https://example.com", "status": "Repetition9"},
            {"source_url": "https://example.com"},
        ],
    )
    def test_malformed_item_raises_store_error(self, item) -> None:
        with pytest.raises(StoreError, match="Malformed article item"):
            ArticleRecord.from_item(item)
