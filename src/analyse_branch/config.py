import logging
import os

from analyse_branch.domain.interfaces import GitRepository

DEFAULT_UPSTREAM = "master"
UPSTREAMS_ENV = "ANALYSE_BRANCH_UPSTREAMS"
UPSTREAMS_GIT_KEY = "analyse.upstream"


def default_upstreams(repository: GitRepository) -> list[str]:
    """Upstream branches to use when none are given on the command line.

    Looked up in the ``ANALYSE_BRANCH_UPSTREAMS`` environment variable
    (whitespace separated), then in the multi-valued ``analyse.upstream``
    git config key, falling back to ``master``.
    """
    from_env = os.environ.get(UPSTREAMS_ENV, "").split()
    if from_env:
        logging.info("Using upstream branches from %s: %s", UPSTREAMS_ENV, " ".join(from_env))
        return from_env

    from_git = repository.config_values(UPSTREAMS_GIT_KEY)
    if from_git:
        logging.info("Using upstream branches from git config %s: %s",
                     UPSTREAMS_GIT_KEY, " ".join(from_git))
        return from_git

    return [DEFAULT_UPSTREAM]
