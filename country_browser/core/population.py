from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Tuple

from .exceptions import UnknownBucketError

UNFILTERED_LABEL = "Population"


@dataclass(frozen=True)
class PopulationBuckets:
    """
    Immutable table of population buckets (label -> exclusive upper bound).

    One reserved label maps to the largest representable integer and means
    "no population filter". Label order is the order shown in the selector.
    """

    entries: Tuple[Tuple[str, int], ...]
    unfiltered_label: str = UNFILTERED_LABEL

    def __post_init__(self) -> None:
        labels = [label for label, _ in self.entries]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Duplicate population bucket labels: {labels}")
        if self.unfiltered_label not in labels:
            raise ValueError(
                f"Unfiltered label '{self.unfiltered_label}' missing from buckets"
            )

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(label for label, _ in self.entries)

    def threshold(self, label: str) -> int:
        for name, limit in self.entries:
            if name == label:
                return limit
        raise UnknownBucketError(f"Unknown population bucket '{label}'")

    def is_unfiltered(self, label: str) -> bool:
        return label == self.unfiltered_label

    def validate(self, label: str) -> str:
        self.threshold(label)
        return label

    def __contains__(self, label: object) -> bool:
        return label in self.labels

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_BUCKETS = PopulationBuckets(
    entries=(
        (UNFILTERED_LABEL, sys.maxsize),
        ("<1 Million", 1_000_000),
        ("<5 Million", 5_000_000),
        ("<10 Million", 10_000_000),
    ),
)
