from dataclasses import dataclass


@dataclass
class Branch:
    name: str
    # full sha the name pointed at when the analysis started
    tip: str

    def __str__(self) -> str:
        return self.name
