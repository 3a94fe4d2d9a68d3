from tests.mocks.mock_git import MockGitRepository

__all__ = ["MockGitRepository"]
