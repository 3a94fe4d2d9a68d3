import logging
import shlex

from analyse_branch.domain.exceptions import (BranchNotFoundError,
                                              CommandExecutionError,
                                              HistoryQueryError)
from analyse_branch.domain.interfaces import GitRepository
from analyse_branch.domain.utils import exec_cmd, split_lines


class LocalGit(GitRepository):
    def __git(self, args: str, exit_on_error: bool = True) -> str:
        return exec_cmd(f"git {args}", exit_on_error=exit_on_error, cwd=self.git_dir)

    def resolve_symbolic_ref(self, marker: str) -> str:
        try:
            return self.__git(f"symbolic-ref --short {shlex.quote(marker)}").rstrip('\n')
        except CommandExecutionError as e:
            # detached HEAD has no branch name to report on
            logging.debug(e.stderr)
            raise BranchNotFoundError(marker) from e

    def resolve_commit(self, ref: str) -> str:
        try:
            return self.__git(
                f"rev-parse --verify --quiet {shlex.quote(ref + '^{commit}')}").rstrip('\n')
        except CommandExecutionError as e:
            raise BranchNotFoundError(ref) from e

    def first_parent_ancestry(self, ref: str) -> list[str]:
        try:
            return split_lines(self.__git(f"rev-list --first-parent {shlex.quote(ref)}"))
        except CommandExecutionError as e:
            raise HistoryQueryError(f"Cannot list first-parent history of {ref}") from e

    def commit_age(self, sha: str) -> str:
        return self.__git(f"log -n1 --format=%ar {shlex.quote(sha)}").rstrip('\n')

    def merge_base(self, ref_a: str, ref_b: str) -> str:
        try:
            merge_base = self.__git(
                f"merge-base {shlex.quote(ref_a)} {shlex.quote(ref_b)}").rstrip('\n')
        except CommandExecutionError as e:
            raise HistoryQueryError(f"No merge-base between {ref_a} and {ref_b}") from e

        # exits 1 without output for unrelated histories, but stay safe
        if merge_base == '':
            raise HistoryQueryError(f"No merge-base between {ref_a} and {ref_b}")

        return merge_base

    def count_reachable_excluding(self, include: str, exclude: str,
                                  first_parent_only: bool = False) -> int:
        first_parent = "--first-parent " if first_parent_only else ""
        try:
            count = self.__git(
                f"rev-list {first_parent}--count {shlex.quote(include)} {shlex.quote('^' + exclude)}")
        except CommandExecutionError as e:
            raise HistoryQueryError(f"Cannot count commits in {exclude}..{include}") from e

        return int(count.strip())

    def short_form(self, sha: str) -> str:
        return self.__git(f"rev-parse --short {shlex.quote(sha)}").rstrip('\n')

    def config_values(self, key: str) -> list[str]:
        # exits 1 when the key is not set
        return split_lines(self.__git(f"config --get-all {shlex.quote(key)}", exit_on_error=False))
