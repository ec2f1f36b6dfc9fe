from prlens.infra.export.json_export import (
    dump_json,
    dump_prs,
    dump_reviews,
    dump_stats,
    enriched_pr_to_dict,
    review_stats_to_dict,
    review_to_dict,
)

__all__ = [
    "dump_json",
    "dump_prs",
    "dump_reviews",
    "dump_stats",
    "enriched_pr_to_dict",
    "review_stats_to_dict",
    "review_to_dict",
]
