import logging

from analyse_branch.domain.git_objects import Branch, Commit


class GitRepository():
    """Read-only history queries the divergence analysis is built on."""

    git_dir: str

    def __init__(self, git_dir: str = ".") -> None:
        self.git_dir = git_dir

    def resolve_branch(self, name: str) -> Branch:
        tip = self.resolve_commit(name)
        logging.debug("Resolved %s to %s", name, tip)
        return Branch(name=name, tip=tip)

    def commit(self, sha: str) -> Commit:
        return Commit(sha=sha, short_sha=self.short_form(sha), age=self.commit_age(sha))

    def resolve_symbolic_ref(self, marker: str) -> str:
        raise NotImplementedError

    def resolve_commit(self, ref: str) -> str:
        raise NotImplementedError

    def first_parent_ancestry(self, ref: str) -> list[str]:
        """Full shas reachable through first parents, from ``ref`` back to the root."""
        raise NotImplementedError

    def commit_age(self, sha: str) -> str:
        raise NotImplementedError

    def merge_base(self, ref_a: str, ref_b: str) -> str:
        raise NotImplementedError

    def count_reachable_excluding(self, include: str, exclude: str,
                                  first_parent_only: bool = False) -> int:
        raise NotImplementedError

    def short_form(self, sha: str) -> str:
        raise NotImplementedError

    def config_values(self, key: str) -> list[str]:
        raise NotImplementedError
