from __future__ import annotations

from queue import Empty, Full, Queue
import threading
import time
from typing import Any

from loguru import logger

from polywire.utils.trackers.base import LogWriter


def _sanitize(s: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_.=," else "_" for ch in str(s))


def _render_tag(path: list[str], metric: str, labels: dict[str, str]) -> str:
    base = "/".join(_sanitize(x) for x in [*path, metric] if x)
    if not labels:
        return base
    return base + (
        "/"
        + ",".join(f"{_sanitize(k)}={_sanitize(v)}" for k, v in sorted(labels.items()))
    )


class LoggerBackend:
    """
    Minimal adapter every backend must implement.
    write_* may buffer; flush() must push buffered data out.
    """

    def open(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def write_scalar(self, tag: str, value: float, step: int, wall_time: float) -> None:
        raise NotImplementedError

    def write_text(self, tag: str, text: str, step: int, wall_time: float) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        raise NotImplementedError


class GenericLogger(LogWriter):
    """Queue events from the search thread and write them from a daemon thread.

    Events without an explicit ``step`` get the next step of their tag.
    Events offered while the queue is full are dropped.
    """

    def __init__(
        self, backend: LoggerBackend, *, queue_size: int = 8192, flush_secs: float = 3.0
    ):
        self.backend = backend
        self._steps: dict[str, int] = {}
        self._q: Queue[dict[str, Any]] = Queue(maxsize=queue_size)
        self._stop = threading.Event()
        self._closed = False
        self._flush_secs = float(flush_secs)
        self._last_flush = time.time()

        self.backend.open()
        self._t = threading.Thread(
            target=self._loop, name="polywire-writer", daemon=True
        )
        self._t.start()

    def bind(
        self, *, path: list[str] | None = None, labels: dict[str, str] | None = None
    ) -> BoundGeneric:
        return BoundGeneric(self, path or [], labels or {})

    def scalar(self, metric: str, value: float, **kw) -> None:
        self._offer("scalar", metric, {"value": float(value)}, kw)

    def text(self, tag: str, text: str, **kw) -> None:
        self._offer("text", tag, {"text": text}, kw)

    def close(self, drain_timeout_s: float = 1.5) -> None:
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        if self._t.is_alive():
            self._t.join(timeout=2.0)

        deadline = time.time() + max(0.0, drain_timeout_s)
        while time.time() < deadline:
            try:
                event = self._q.get_nowait()
            except Empty:
                break
            self._handle(event)

        self.backend.close()

    # internals
    def _offer(self, kind: str, metric: str, payload: dict[str, Any], kw: dict) -> None:
        if self._closed:
            return
        event = {
            "k": kind,
            "metric": metric,
            "step": kw.get("step"),
            "t": kw.get("wall_time") or time.time(),
            "path": kw.get("path") or [],
            "labels": kw.get("labels") or {},
            **payload,
        }
        try:
            self._q.put_nowait(event)
        except Full:
            logger.debug(f"[GenericLogger] queue full, dropping {metric}")

    def _loop(self) -> None:
        while not self._stop.is_set():
            try:
                event = self._q.get(timeout=0.1)
            except Empty:
                event = None
            if event is not None:
                self._handle(event)

            now = time.time()
            if (now - self._last_flush) >= self._flush_secs:
                self._flush()
                self._last_flush = now

    def _flush(self) -> None:
        try:
            self.backend.flush()
        except Exception as exc:
            logger.warning(f"[GenericLogger] backend flush failed: {exc}")

    def _handle(self, e: dict[str, Any]) -> None:
        tag = _render_tag(e["path"], e["metric"], e["labels"])
        step = self._resolve_step(tag, e.get("step"))
        try:
            if e["k"] == "scalar":
                self.backend.write_scalar(tag, e["value"], step, e["t"])
            else:
                self.backend.write_text(tag, e["text"], step, e["t"])
        except Exception as exc:
            logger.warning(f"[GenericLogger] failed to write {tag}: {exc}")

    def _resolve_step(self, tag: str, step: int | None) -> int:
        if step is None:
            step = self._steps.get(tag, -1) + 1
        self._steps[tag] = int(step)
        return int(step)


class BoundGeneric(LogWriter):
    def __init__(self, base: GenericLogger, path: list[str], labels: dict[str, str]):
        self._base = base
        self._path = list(path)
        self._labels = dict(labels)

    def bind(
        self, *, path: list[str] | None = None, labels: dict[str, str] | None = None
    ) -> BoundGeneric:
        return BoundGeneric(
            self._base, [*self._path, *(path or [])], {**self._labels, **(labels or {})}
        )

    def scalar(self, metric: str, value: float, **kw) -> None:
        path = [*self._path, *kw.pop("path", [])]
        labels = {**self._labels, **kw.pop("labels", {})}
        self._base.scalar(metric, value, path=path, labels=labels, **kw)

    def text(self, tag: str, text: str, **kw) -> None:
        path = [*self._path, *kw.pop("path", [])]
        labels = {**self._labels, **kw.pop("labels", {})}
        self._base.text(tag, text, path=path, labels=labels, **kw)

    def close(self) -> None:
        self._base.close()
