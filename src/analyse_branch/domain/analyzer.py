import logging
from typing import Sequence, Union

from analyse_branch.domain.ancestry import find_fork_point
from analyse_branch.domain.exceptions import HistoryQueryError, InvalidInputError
from analyse_branch.domain.git_objects import Branch
from analyse_branch.domain.interfaces import GitRepository
from analyse_branch.domain.report import AnalysisResult, DivergenceReport

CURRENT_BRANCH_MARKER = "HEAD"


class _ParentTracker:
    def __init__(self) -> None:
        self.branch: Union[str, None] = None
        self.distance: Union[int, None] = None

    def update(self, report: DivergenceReport) -> None:
        # strict comparison: on a tie the upstream seen first stays the parent
        if self.distance is None or report.distance_to_fork_point < self.distance:
            self.distance = report.distance_to_fork_point
            self.branch = report.upstream


class DivergenceAnalyzer:
    """Relates a feature branch to candidate upstream branches.

    For every upstream the analyzer finds the initial fork point (on
    first-parent chains) and the merge-base, measures how far each side
    moved since, and picks the upstream whose fork point is closest to the
    feature tip as the most likely parent. Only read-only queries are made
    against the repository and the first failing one aborts the analysis.
    """

    def __init__(self, repository: GitRepository) -> None:
        self.repository = repository

    def analyze(self, feature: str, upstreams: Sequence[str]) -> AnalysisResult:
        if feature == CURRENT_BRANCH_MARKER:
            feature = self.repository.resolve_symbolic_ref(CURRENT_BRANCH_MARKER)
            logging.debug("%s points to branch %s", CURRENT_BRANCH_MARKER, feature)

        self.validate(feature, upstreams)

        feature_branch = self.repository.resolve_branch(feature)
        upstream_branches = [self.repository.resolve_branch(name) for name in upstreams]

        tracker = _ParentTracker()
        reports: list[DivergenceReport] = []

        for upstream_branch in upstream_branches:
            report = self.compare(feature_branch, upstream_branch)
            tracker.update(report)
            reports.append(report)

        logging.debug("Most recent initial fork is from %s (%s commits)",
                      tracker.branch, tracker.distance)

        return AnalysisResult(feature=feature, reports=tuple(reports), parent=tracker.branch)

    @staticmethod
    def validate(feature: str, upstreams: Sequence[str]) -> None:
        if not upstreams:
            raise InvalidInputError("At least one upstream branch is required")

        for branch in upstreams:
            if branch == feature:
                raise InvalidInputError(
                    f"Cannot proceed with branch [{branch}] both as the feature branch "
                    "and an upstream branch")

    def compare(self, feature: Branch, upstream: Branch) -> DivergenceReport:
        logging.debug("Comparing %s with %s", feature, upstream)
        repository = self.repository

        fork_sha = find_fork_point(
            repository.first_parent_ancestry(upstream.tip),
            repository.first_parent_ancestry(feature.tip))
        if fork_sha is None:
            raise HistoryQueryError(
                f"First-parent histories of {upstream} and {feature} share no commit")

        fork_point = repository.commit(fork_sha)
        distance_to_fork_point = repository.count_reachable_excluding(
            feature.tip, fork_sha, first_parent_only=False)

        merge_base = repository.commit(repository.merge_base(upstream.tip, feature.tip))

        return DivergenceReport(
            feature=feature.name,
            upstream=upstream.name,
            fork_point=fork_point,
            distance_to_fork_point=distance_to_fork_point,
            merge_base=merge_base,
            distance_feature_to_merge_base=repository.count_reachable_excluding(
                feature.tip, merge_base.sha, first_parent_only=True),
            distance_upstream_to_merge_base=repository.count_reachable_excluding(
                upstream.tip, merge_base.sha, first_parent_only=True))
