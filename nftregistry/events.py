from typing import Any, Callable, List, NamedTuple, Optional


class Mint(NamedTuple):
    receiver: Any
    token_id: int


class Transfer(NamedTuple):
    sender: Any
    to: Any
    token_id: int


class EventLog:
    """
    Buffers the events emitted during a single invocation. The executor
    releases them to the environment's sink only when the invocation
    succeeds and discards them otherwise.
    """
    def __init__(self, sink: Optional[Callable[[Any], None]] = None):
        self.sink = sink
        self.pending: List[Any] = []

    def emit(self, event):
        self.pending.append(event)

    def release(self) -> List[Any]:
        events, self.pending = self.pending, []
        if self.sink is not None:
            for event in events:
                self.sink(event)
        return events

    def discard(self):
        self.pending = []
