from dataclasses import dataclass


@dataclass(frozen=True)
class Commit:
    sha: str
    short_sha: str
    # relative age as printed by git, e.g. "3 days ago"
    age: str

    def __str__(self) -> str:
        return self.short_sha
