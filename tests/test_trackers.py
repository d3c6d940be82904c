from polywire.utils.trackers import GenericLogger, LoggerBackend


class MemoryBackend(LoggerBackend):
    def __init__(self):
        self.opened = False
        self.closed = False
        self.scalars: list[tuple[str, float, int]] = []
        self.texts: list[tuple[str, str, int]] = []

    def open(self) -> None:
        self.opened = True

    def close(self) -> None:
        self.closed = True

    def write_scalar(self, tag, value, step, wall_time) -> None:
        self.scalars.append((tag, value, step))

    def write_text(self, tag, text, step, wall_time) -> None:
        self.texts.append((tag, text, step))

    def flush(self) -> None:
        pass


def test_events_reach_backend_with_bound_path():
    backend = MemoryBackend()
    writer = GenericLogger(backend, flush_secs=0.05)
    bound = writer.bind(path=["search"], labels={"run": "a"})

    bound.scalar("best_fitness", 1.5, step=3)
    bound.scalar("best_fitness", 2.0)
    bound.text("note", "done")
    writer.close()

    assert backend.opened and backend.closed
    assert backend.scalars == [
        ("search/best_fitness/run=a", 1.5, 3),
        ("search/best_fitness/run=a", 2.0, 4),
    ]
    assert backend.texts == [("search/note/run=a", "done", 0)]


def test_closed_writer_ignores_events():
    backend = MemoryBackend()
    writer = GenericLogger(backend)
    writer.close()
    writer.scalar("late", 1.0)
    writer.close()
    assert backend.scalars == []
