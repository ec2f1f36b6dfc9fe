import json

import pytest

from prlens.config import REPORT_PRS, REPORT_REVIEWS
from prlens.core.exceptions import ConfigurationError
from prlens.core.schema import RepositoryRef
from prlens.core.services import ReviewDashboard
from prlens.infra.logging import ConsoleLogger
from prlens.setup import _build_logger, run_report
from tests.builders import make_pull_request, make_review
from tests.fakes import FakePRSource
from tests.settings import get_test_settings


APP = RepositoryRef(owner="acme", name="app")
API = RepositoryRef(owner="acme", name="api")


def _dashboard(clock, logger) -> ReviewDashboard:
    source = FakePRSource(
        open_prs={"acme/app": [make_pull_request()]},
        reviews={
            ("acme/app", 42): [make_review(login="bob")],
            ("acme/api", 42): [make_review(login="carol")],
        },
    )
    return ReviewDashboard(source, clock, logger)


class TestRunReport:
    def test_stats_report(self, clock, logger, test_settings) -> None:
        payload = json.loads(run_report(_dashboard(clock, logger), test_settings))

        assert payload["stats"]["totalOpenPRs"] == 1

    def test_prs_report(self, clock, logger) -> None:
        settings = get_test_settings(report=REPORT_PRS)

        payload = json.loads(run_report(_dashboard(clock, logger), settings))

        assert payload["prs"][0]["reviewStatus"] == "approved"

    def test_reviews_report(self, clock, logger) -> None:
        settings = get_test_settings(report=REPORT_REVIEWS, pr_number=42)

        payload = json.loads(run_report(_dashboard(clock, logger), settings))

        assert [review["user"]["login"] for review in payload["reviews"]] == ["bob"]

    def test_reviews_report_requires_pr_number(self, clock, logger) -> None:
        settings = get_test_settings(report=REPORT_REVIEWS)

        with pytest.raises(ConfigurationError):
            run_report(_dashboard(clock, logger), settings)

    def test_reviews_report_uses_named_repository(self, clock, logger) -> None:
        settings = get_test_settings(
            report=REPORT_REVIEWS,
            pr_number=42,
            repositories=(APP, API),
            review_repository=API,
        )

        payload = json.loads(run_report(_dashboard(clock, logger), settings))

        assert [review["user"]["login"] for review in payload["reviews"]] == ["carol"]

    def test_reviews_report_is_ambiguous_across_repositories(self, clock, logger) -> None:
        settings = get_test_settings(
            report=REPORT_REVIEWS,
            pr_number=42,
            repositories=(APP, API),
        )

        with pytest.raises(ConfigurationError):
            run_report(_dashboard(clock, logger), settings)


class TestBuildLogger:
    def test_console_backend(self, test_settings) -> None:
        assert isinstance(_build_logger(test_settings), ConsoleLogger)
