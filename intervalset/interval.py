from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"

    @property
    def length(self) -> int:
        """Number of integer points covered (closed range)."""
        return self.end - self.start + 1

    def contains(self, point: int) -> bool:
        return self.start <= point <= self.end

    def overlaps(self, start: int, end: int) -> bool:
        """True if the closed range [start, end] shares a point with this one.

        The pair is not validated: an inverted pair is tested literally.
        """
        return not (end < self.start or start > self.end)
