from datetime import timedelta

from prlens.core.analytics.time_metrics import (
    calculate_pr_age,
    calculate_time_in_review,
)
from prlens.core.schema import ReviewState
from tests.builders import make_review, ts


CREATED_AT = ts("2026-02-01T10:00:00Z")


class TestCalculatePRAge:
    def test_twenty_five_hours_is_one_day(self) -> None:
        now = CREATED_AT + timedelta(hours=25)

        age = calculate_pr_age(CREATED_AT, now)

        assert age.days == 1
        assert age.hours == 25

    def test_just_created_is_zero(self) -> None:
        age = calculate_pr_age(CREATED_AT, CREATED_AT + timedelta(seconds=30))

        assert age.days == 0
        assert age.hours == 0

    def test_truncates_partial_units(self) -> None:
        now = CREATED_AT + timedelta(days=2, hours=23, minutes=59)

        age = calculate_pr_age(CREATED_AT, now)

        assert age.days == 2
        assert age.hours == 71

    def test_future_timestamp_is_not_clamped(self) -> None:
        now = CREATED_AT - timedelta(hours=30)

        age = calculate_pr_age(CREATED_AT, now)

        assert age.days == -1
        assert age.hours == -30


class TestCalculateTimeInReview:
    def test_returns_none_without_reviews(self) -> None:
        result = calculate_time_in_review(CREATED_AT, [])

        assert result.hours is None
        assert result.first_review_at is None

    def test_comments_are_not_substantive(self) -> None:
        reviews = [
            make_review(ReviewState.COMMENTED, "2026-02-02T10:00:00Z"),
            make_review(ReviewState.DISMISSED, "2026-02-02T11:00:00Z"),
            make_review(ReviewState.PENDING, "2026-02-02T12:00:00Z"),
        ]

        result = calculate_time_in_review(CREATED_AT, reviews)

        assert result.hours is None
        assert result.first_review_at is None

    def test_hours_until_first_approval(self) -> None:
        reviews = [make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z")]

        result = calculate_time_in_review(CREATED_AT, reviews)

        assert result.hours == 24
        assert result.first_review_at == ts("2026-02-02T10:00:00Z")

    def test_picks_earliest_substantive_review(self) -> None:
        reviews = [
            make_review(
                ReviewState.CHANGES_REQUESTED,
                "2026-02-03T10:00:00Z",
                login="carol",
            ),
            make_review(ReviewState.COMMENTED, "2026-02-01T12:00:00Z"),
            make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z"),
        ]

        result = calculate_time_in_review(CREATED_AT, reviews)

        assert result.hours == 24
        assert result.first_review_at == ts("2026-02-02T10:00:00Z")

    def test_equal_earliest_timestamps_pick_first_in_input_order(self) -> None:
        first = make_review(
            ReviewState.CHANGES_REQUESTED,
            "2026-02-02T10:00:00Z",
            login="carol",
            review_id=7,
        )
        second = make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z", review_id=3)

        result = calculate_time_in_review(CREATED_AT, [first, second])
        reversed_result = calculate_time_in_review(CREATED_AT, [second, first])

        assert result.first_review_at == first.submitted_at
        assert result.hours == 24
        assert reversed_result == result

    def test_truncates_to_whole_hours(self) -> None:
        reviews = [make_review(ReviewState.APPROVED, "2026-02-01T12:59:00Z")]

        result = calculate_time_in_review(CREATED_AT, reviews)

        assert result.hours == 2

    def test_does_not_mutate_input(self) -> None:
        reviews = [
            make_review(ReviewState.APPROVED, "2026-02-03T10:00:00Z", review_id=1),
            make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z", review_id=2),
        ]
        snapshot = list(reviews)

        calculate_time_in_review(CREATED_AT, reviews)

        assert reviews == snapshot
