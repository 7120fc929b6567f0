from typing import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    Runs callbacks once on the next frame, like a browser's animation frame
    queue. A callback that wants to keep running must request a new frame.
    """

    def __init__(self):
        self._callbacks: dict[int, FrameCallback] = {}
        self._running: dict[int, FrameCallback] = {}
        self._next_handle = 1

    @property
    def pending(self) -> int:
        return len(self._callbacks) + len(self._running)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel_frame(self, handle: int):
        self._callbacks.pop(handle, None)
        self._running.pop(handle, None)

    def run_frame(self, timestamp_ms: float) -> int:
        # Callbacks requested while this frame runs wait for the next one
        self._running, self._callbacks = self._callbacks, {}
        ran = 0
        while self._running:
            handle = next(iter(self._running))
            callback = self._running.pop(handle)
            callback(timestamp_ms)
            ran += 1
        return ran
