from .branch import Branch
from .commit import Commit

__all__ = [
    "Branch",
    "Commit"]
