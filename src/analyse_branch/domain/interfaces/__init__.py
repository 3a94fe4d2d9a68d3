from .git_repository import GitRepository

__all__ = ["GitRepository"]
