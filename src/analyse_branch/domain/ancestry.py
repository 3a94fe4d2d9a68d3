from typing import Sequence, Union


def find_fork_point(upstream_ancestry: Sequence[str],
                    feature_ancestry: Sequence[str]) -> Union[str, None]:
    """Return the newest commit shared by two first-parent ancestries.

    Both sequences are ordered tip first. They are walked from the root end
    and the last position where they still agree is the fork point. A
    commit has a single first parent, so once two chains share a commit
    they share everything below it and the agreeing part is one unbroken
    run starting at the root.

    Returns None when the chains do not even share their root.
    """
    fork_point = None

    for upstream_sha, feature_sha in zip(reversed(upstream_ancestry),
                                         reversed(feature_ancestry)):
        if upstream_sha != feature_sha:
            break
        fork_point = upstream_sha

    return fork_point
