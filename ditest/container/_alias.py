from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Alias:
    id: str
    public: bool = True

    def __str__(self) -> str:
        return self.id
