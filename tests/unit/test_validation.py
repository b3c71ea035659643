"""Unit tests for input parsing and validation outcomes."""

from cinema_api.handlers.validation import (
    Invalid,
    Valid,
    bind_identifier,
    parse_page,
    parse_positive_int,
    parse_record,
)
from cinema_api.schemas import Movie, Schedule
from cinema_api.schemas.common import MAX_ID


class TestParsePositiveInt:
    def test_parses_digits(self) -> None:
        assert parse_positive_int("42") == Valid(42)

    def test_accepts_int(self) -> None:
        assert parse_positive_int(7) == Valid(7)

    def test_strips_whitespace(self) -> None:
        assert parse_positive_int(" 3 ") == Valid(3)

    def test_rejects_zero(self) -> None:
        assert isinstance(parse_positive_int("0"), Invalid)

    def test_rejects_negative(self) -> None:
        assert isinstance(parse_positive_int("-5"), Invalid)

    def test_rejects_non_numeric(self) -> None:
        assert isinstance(parse_positive_int("abc"), Invalid)

    def test_rejects_decimal(self) -> None:
        assert isinstance(parse_positive_int("1.5"), Invalid)

    def test_rejects_none(self) -> None:
        assert isinstance(parse_positive_int(None), Invalid)

    def test_rejects_bool(self) -> None:
        assert isinstance(parse_positive_int(True), Invalid)


class TestParsePage:
    def test_valid_page(self) -> None:
        assert parse_page("4") == 4

    def test_absent_page_is_first(self) -> None:
        assert parse_page(None) == 1

    def test_garbage_page_is_first(self) -> None:
        assert parse_page("last") == 1

    def test_non_positive_page_is_first(self) -> None:
        assert parse_page("0") == 1
        assert parse_page("-2") == 1


class TestParseRecord:
    def test_parses_camel_case_body(self) -> None:
        outcome = parse_record(Movie, {"title": "Alien", "releaseDate": "1979-05-25"})

        assert isinstance(outcome, Valid)
        assert outcome.value.title == "Alien"
        assert outcome.value.id == 0
        assert str(outcome.value.release_date) == "1979-05-25"

    def test_accepts_snake_case_body(self) -> None:
        outcome = parse_record(
            Schedule, {"movie_id": 3, "start_time": "2026-02-20T18:30:00+00:00"}
        )

        assert isinstance(outcome, Valid)
        assert outcome.value.movie_id == 3

    def test_none_body_is_invalid(self) -> None:
        assert isinstance(parse_record(Movie, None), Invalid)

    def test_missing_required_field_is_invalid(self) -> None:
        assert isinstance(parse_record(Movie, {"description": "No title"}), Invalid)

    def test_non_object_body_is_invalid(self) -> None:
        assert isinstance(parse_record(Movie, ["Alien"]), Invalid)

    def test_negative_id_is_invalid(self) -> None:
        assert isinstance(parse_record(Movie, {"id": -1, "title": "Alien"}), Invalid)


class TestBindIdentifier:
    def test_without_url_id_returns_body_unchanged(self) -> None:
        body = {"id": 5, "title": "Alien"}
        assert bind_identifier(body, None) == Valid(body)

    def test_fills_missing_body_id(self) -> None:
        assert bind_identifier({"title": "Alien"}, "5") == Valid({"title": "Alien", "id": 5})

    def test_fills_zero_body_id(self) -> None:
        assert bind_identifier({"id": 0, "title": "Alien"}, "5") == Valid(
            {"id": 5, "title": "Alien"}
        )

    def test_matching_ids_pass(self) -> None:
        body = {"id": 5, "title": "Alien"}
        assert bind_identifier(body, "5") == Valid(body)

    def test_mismatched_ids_are_invalid(self) -> None:
        assert isinstance(bind_identifier({"id": 6, "title": "Alien"}, "5"), Invalid)

    def test_bad_url_id_is_invalid(self) -> None:
        assert isinstance(bind_identifier({"title": "Alien"}, "five"), Invalid)

    def test_non_object_body_is_invalid(self) -> None:
        assert isinstance(bind_identifier(None, "5"), Invalid)


class TestIdentifierRange:
    def test_largest_storable_identifier(self) -> None:
        assert parse_positive_int(str(MAX_ID)) == Valid(MAX_ID)

    def test_rejects_identifier_beyond_storage_range(self) -> None:
        assert isinstance(parse_positive_int(str(MAX_ID + 1)), Invalid)

    def test_rejects_twenty_digit_identifier(self) -> None:
        outcome = parse_positive_int("99999999999999999999")

        assert isinstance(outcome, Invalid)
        assert outcome.reason.startswith("out of range")

    def test_oversized_page_is_first(self) -> None:
        assert parse_page("99999999999999999999") == 1

    def test_oversized_body_id_is_invalid(self) -> None:
        assert isinstance(parse_record(Movie, {"id": MAX_ID + 1, "title": "Alien"}), Invalid)

    def test_oversized_body_movie_id_is_invalid(self) -> None:
        body = {"movieId": 99999999999999999999, "startTime": "2026-02-20T18:30:00+00:00"}
        assert isinstance(parse_record(Schedule, body), Invalid)


def test_bind_identifier_does_not_treat_false_as_missing_id() -> None:
    assert isinstance(bind_identifier({"id": False, "title": "Alien"}, "5"), Invalid)
