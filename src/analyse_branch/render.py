from rich.console import Console
from rich.text import Text

from analyse_branch.domain.report import AnalysisResult, DivergenceReport

HEADING_STYLE = "blue"
SHA_STYLE = "green"
AGE_STYLE = "cyan"
DISTANCE_STYLE = "red"


def render_report(report: DivergenceReport) -> list[Text]:
    feature, upstream = report.feature, report.upstream

    return [
        Text.assemble((f"{feature} in relation to ", HEADING_STYLE),
                      (upstream, f"{HEADING_STYLE} underline")),
        Text.assemble(f"Was forked from an ancestor of {upstream} ",
                      (f"{report.distance_to_fork_point} commits ago", DISTANCE_STYLE),
                      " at ",
                      (report.fork_point.short_sha, SHA_STYLE),
                      " (",
                      (report.fork_point.age, AGE_STYLE),
                      ")"),
        Text.assemble(f"Has most recent common ancestor (merge-base) with {upstream} ",
                      (report.merge_base.age, AGE_STYLE),
                      " at ",
                      (report.merge_base.short_sha, SHA_STYLE)),
        Text.assemble(f"Distance to merge-base from {feature} is ",
                      (f"{report.distance_feature_to_merge_base} commits", DISTANCE_STYLE)),
        Text.assemble(f"Distance to merge-base from {upstream} is ",
                      (f"{report.distance_upstream_to_merge_base} commits", DISTANCE_STYLE)),
    ]


def render_summary(result: AnalysisResult) -> Text:
    return Text.assemble(
        f"Based on initial fork points from branches [{' '.join(result.upstreams)}], "
        f"looks like {result.feature} was forked from ",
        (result.parent, SHA_STYLE))


def render_result(result: AnalysisResult, console: Console) -> None:
    console.print(Text.assemble(("Analysis of branch: ", "bold"),
                                (result.feature, "bold underline")))
    console.print()

    for report in result.reports:
        for line in render_report(report):
            console.print(line)
        console.print()

    console.print(render_summary(result))
