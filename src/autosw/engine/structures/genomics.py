from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class NamedString:
    name: str
    sequence: str

@dataclass(frozen=True)
class NamedRead:
    name: str
    sequence: str
    quality: Optional[str]
