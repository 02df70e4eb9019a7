from dataclasses import dataclass
from enum import Enum
from typing import Union

class FailureReason(str, Enum):
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    ABORTED_BY_PEER = "aborted_by_peer"

@dataclass(frozen=True)
class FetchRequest:
    url: str
    timeout_ms: int

@dataclass(frozen=True)
class FetchSuccess:
    body: str

@dataclass(frozen=True)
class FetchFailure:
    reason: FailureReason
    detail: str = ""

FetchOutcome = Union[FetchSuccess, FetchFailure]
