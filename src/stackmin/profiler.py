"""
A simple ``print()`` profiler for a single operation.

It can time several sequential tasks within that operation: each call to
``finish_current_task`` resets the task timer but not the operation total.
Call ``finish_profiler`` when the whole operation is complete.
"""
from __future__ import annotations

import time


def _fmt_ms(ms: int) -> str:
    return f"{ms:,}"


class PrintProfiler:
    def __init__(self, name: str, print_to_stdout: bool = False):
        self.name = name
        self.print_to_stdout = print_to_stdout
        self._previous_task_ms = 0
        self._task_started = time.perf_counter()
        self._stopped_at: float | None = None

    def current_elapsed_ms(self) -> int:
        """Elapsed time of the current task."""
        end = self._stopped_at if self._stopped_at is not None else time.perf_counter()
        return int((end - self._task_started) * 1000)

    def finish_current_task(self, task_name: str) -> str:
        ms = self.current_elapsed_ms()
        self._previous_task_ms += ms
        self._task_started = time.perf_counter()
        self._stopped_at = None
        output = f"{self.name}, {task_name} {_fmt_ms(ms)}ms"
        if self.print_to_stdout:
            print(output)
        return output

    def finish_profiler(self) -> str:
        """Stop the timer and report the total time for the operation."""
        if self._stopped_at is None:
            self._stopped_at = time.perf_counter()
        output = f"{self.name} total: {_fmt_ms(self.total_elapsed_ms())}ms"
        if self.print_to_stdout:
            print(output)
        return output

    def total_elapsed_ms(self) -> int:
        return self._previous_task_ms + self.current_elapsed_ms()
