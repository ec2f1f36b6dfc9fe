import itertools

from prlens.core.analytics.review_state import (
    determine_review_status,
    latest_reviews_by_user,
)
from prlens.core.schema import ReviewState, ReviewStatus
from tests.builders import make_review


class TestLatestReviewsByUser:
    def test_keeps_most_recent_per_login(self) -> None:
        older = make_review(ReviewState.CHANGES_REQUESTED, "2026-02-01T10:00:00Z", review_id=1)
        newer = make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z", review_id=2)

        latest = latest_reviews_by_user([newer, older])

        assert latest == {"bob": newer}

    def test_equal_timestamps_keep_first_seen(self) -> None:
        first = make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z", review_id=1)
        second = make_review(ReviewState.COMMENTED, "2026-02-02T10:00:00Z", review_id=2)

        latest = latest_reviews_by_user([first, second])

        assert latest["bob"] is first


class TestDetermineReviewStatus:
    def test_no_reviews(self) -> None:
        assert determine_review_status([]) is ReviewStatus.NO_REVIEWS

    def test_single_approval(self) -> None:
        reviews = [make_review(ReviewState.APPROVED)]

        assert determine_review_status(reviews) is ReviewStatus.APPROVED

    def test_single_change_request(self) -> None:
        reviews = [make_review(ReviewState.CHANGES_REQUESTED)]

        assert determine_review_status(reviews) is ReviewStatus.CHANGES_REQUESTED

    def test_change_request_beats_approval_from_another_reviewer(self) -> None:
        reviews = [
            make_review(ReviewState.CHANGES_REQUESTED, "2026-02-02T10:00:00Z", login="bob"),
            make_review(ReviewState.APPROVED, "2026-02-02T12:00:00Z", login="alice"),
            make_review(ReviewState.APPROVED, "2026-02-03T12:00:00Z", login="carol"),
        ]

        assert determine_review_status(reviews) is ReviewStatus.CHANGES_REQUESTED

    def test_same_reviewer_latest_verdict_wins(self) -> None:
        reviews = [
            make_review(ReviewState.CHANGES_REQUESTED, "2026-02-01T10:00:00Z"),
            make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z"),
        ]

        assert determine_review_status(reviews) is ReviewStatus.APPROVED

    def test_later_comment_overrides_own_approval(self) -> None:
        reviews = [
            make_review(ReviewState.APPROVED, "2026-02-01T10:00:00Z"),
            make_review(ReviewState.COMMENTED, "2026-02-02T10:00:00Z"),
        ]

        assert determine_review_status(reviews) is ReviewStatus.PENDING

    def test_comments_only_is_pending(self) -> None:
        reviews = [
            make_review(ReviewState.COMMENTED),
            make_review(ReviewState.DISMISSED, login="carol"),
        ]

        assert determine_review_status(reviews) is ReviewStatus.PENDING

    def test_result_is_order_independent(self) -> None:
        reviews = [
            make_review(ReviewState.CHANGES_REQUESTED, "2026-02-01T10:00:00Z", login="bob"),
            make_review(ReviewState.APPROVED, "2026-02-02T10:00:00Z", login="bob"),
            make_review(ReviewState.COMMENTED, "2026-02-03T10:00:00Z", login="carol"),
            make_review(ReviewState.APPROVED, "2026-02-01T09:00:00Z", login="carol"),
        ]

        results = {
            determine_review_status(list(order))
            for order in itertools.permutations(reviews)
        }

        assert results == {ReviewStatus.APPROVED}
