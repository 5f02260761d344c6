from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any, TypeAlias


# A symbol is any hashable value of the input alphabet (str char, byte int, ...)
Symbol: TypeAlias = Hashable
FrequencyTable: TypeAlias = dict[Symbol, int]
CodeMap: TypeAlias = dict[Symbol, str]


class Encoder(ABC):
    @abstractmethod
    def encode(self, data) -> dict[str, Any]:
        pass
