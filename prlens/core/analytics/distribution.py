from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from prlens.core.schema.metrics import AgingDistribution, EnrichedPR


def calculate_review_load(prs: Iterable[EnrichedPR]) -> Dict[str, int]:
    load: Dict[str, int] = {}
    for pr in prs:
        for reviewer in pr.requested_reviewers:
            load[reviewer.login] = load.get(reviewer.login, 0) + 1
    return load


def calculate_aging_distribution(prs: Iterable[EnrichedPR]) -> AgingDistribution:
    less_than_one_day = 0
    one_to_three_days = 0
    three_to_seven_days = 0
    more_than_seven_days = 0
    for pr in prs:
        if pr.age_in_days < 1:
            less_than_one_day += 1
        elif pr.age_in_days <= 3:
            one_to_three_days += 1
        elif pr.age_in_days <= 7:
            three_to_seven_days += 1
        else:
            more_than_seven_days += 1
    return AgingDistribution(
        less_than_one_day=less_than_one_day,
        one_to_three_days=one_to_three_days,
        three_to_seven_days=three_to_seven_days,
        more_than_seven_days=more_than_seven_days,
    )


def average_review_time(prs: Iterable[EnrichedPR]) -> float:
    """Mean time-in-review over PRs that have one; 0 when none do."""
    hours = [
        pr.time_in_review_hours
        for pr in prs
        if pr.time_in_review_hours is not None
    ]
    if not hours:
        return 0
    return sum(hours) / len(hours)


def average_review_time_by_repo(prs: Sequence[EnrichedPR]) -> Dict[str, float]:
    groups: Dict[str, List[EnrichedPR]] = defaultdict(list)
    for pr in prs:
        groups[pr.repository].append(pr)
    return {
        repository: average_review_time(repo_prs)
        for repository, repo_prs in groups.items()
    }
