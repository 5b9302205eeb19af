from typing import Optional, Sequence

from app.db.models.label import Label


class LabelConnection:
    """
    A page over an already-resolved list of labels.

    ``first`` caps the number of nodes returned; ``total_count`` always
    reports the full list.
    """

    def __init__(self, labels: Sequence[Label], first: Optional[int] = None):
        if first is not None and first < 0:
            raise ValueError("first must be a non-negative integer")
        self.labels = list(labels)
        self.first = first

    def nodes(self) -> list[Label]:
        if self.first is None:
            return list(self.labels)
        return self.labels[:self.first]

    def total_count(self) -> int:
        return len(self.labels)

    def has_next_page(self) -> bool:
        return self.first is not None and self.first < len(self.labels)
