from enum import Enum


class Rank(str, Enum):
    PREFERRED = "preferred"
    NORMAL = "normal"
    DEPRECATED = "deprecated"

    @classmethod
    def normalize(cls, rank: "Rank | str") -> "Rank":
        if isinstance(rank, Rank):
            return rank
        if isinstance(rank, str):
            try:
                return cls(rank)
            except ValueError:
                pass
        raise ValueError(
            f"{rank!r} is an invalid rank. Must be normal, preferred, or deprecated."
        )
