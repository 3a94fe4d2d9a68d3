from .local_git import LocalGit

__all__ = ["LocalGit"]
