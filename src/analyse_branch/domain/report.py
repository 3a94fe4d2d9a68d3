from dataclasses import dataclass

from analyse_branch.domain.git_objects import Commit


@dataclass(frozen=True)
class DivergenceReport:
    feature: str
    upstream: str
    fork_point: Commit
    # full reachability: every commit of feature missing from the fork point
    distance_to_fork_point: int
    merge_base: Commit
    # first-parent only
    distance_feature_to_merge_base: int
    distance_upstream_to_merge_base: int


@dataclass(frozen=True)
class AnalysisResult:
    feature: str
    reports: tuple[DivergenceReport, ...]
    # upstream with the most recent initial fork
    parent: str

    @property
    def upstreams(self) -> list[str]:
        return [report.upstream for report in self.reports]
