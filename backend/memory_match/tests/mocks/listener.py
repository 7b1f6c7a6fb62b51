from memory_match.logic.events import EventType, SessionEvent


class RecordingListener:
    """Session listener that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[SessionEvent] = []

    def __call__(self, event: SessionEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[SessionEvent]:
        return [event for event in self.events if event.type == event_type]

    def clear(self) -> None:
        self.events.clear()
