class AnalyseBranchError(Exception):
    pass


class InvalidInputError(AnalyseBranchError):
    pass


class GitError(AnalyseBranchError):
    pass


class CommandExecutionError(GitError):
    def __init__(self, message: str, returncode: int = 1, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class BranchNotFoundError(GitError):
    def __init__(self, branch: str) -> None:
        super().__init__(f"Branch [{branch}] cannot be resolved to a commit")
        self.branch = branch


class HistoryQueryError(GitError):
    pass
