"""A small unit-test runner with per-test timeouts, output capture and log files."""

from __future__ import annotations

import io
import sys
import threading
import time
from contextlib import redirect_stdout
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO, Union

__all__ = [
    "Status",
    "UnitTest",
    "TestSuite",
    "get_time",
    "check_timeout",
    "execute_test",
    "format_status",
    "check_output",
    "format_test_output",
    "format_results",
    "create_log_file",
    "TIMEOUT_DELAY",
    "GREEN",
    "RED",
    "BOLDWHITE",
    "RESET",
]

TIMEOUT_DELAY = 10

GREEN = "\033[1;32m"
RED = "\033[1;31m"
BOLDWHITE = "\033[1m\033[37m"
RESET = "\033[0m"


class Status(IntEnum):
    """Exit statuses a test can end with."""

    PENDING = -2
    OK = 0
    SIGILL = 4
    SIGABRT = 6
    SIGBUS = 7
    SIGFPE = 8
    SIGSEGV = 11
    SIGPIPE = 13
    TIMEOUT = 32
    LEAKS = 66
    KO = 255


_SIGNAL_STATUSES = (
    Status.SIGSEGV,
    Status.SIGBUS,
    Status.SIGABRT,
    Status.SIGFPE,
    Status.SIGPIPE,
    Status.SIGILL,
)


@dataclass
class UnitTest:
    """One test: the function under test, its name and its outcome."""

    function: str
    test_name: str
    func: Callable[[], Optional[int]]
    expected_output: str = ""
    status: int = Status.PENDING

    @property
    def filename(self) -> str:
        """Name of the log file holding this test's output."""
        return f"{self.function}_{self.test_name}.log"


def get_time() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def check_timeout(init_time: int, delay: float = TIMEOUT_DELAY) -> bool:
    """Tell whether ``delay`` seconds have passed since ``init_time`` (ms)."""
    return get_time() >= init_time + delay * 1000


def _exit_code(value) -> int:
    if value is None:
        return Status.OK
    return int(value) & 0xFF


def execute_test(test: UnitTest, timeout: float = TIMEOUT_DELAY) -> str:
    """Run ``test`` with a time limit, set its status and return what it printed.

    The returned value of the test function becomes its exit status, reduced
    to a byte as a process exit code would be. An escaping exception counts
    as an abort; a test still running after ``timeout`` seconds times out.
    """
    result: dict = {}

    def target() -> None:
        try:
            result["status"] = _exit_code(test.func())
        except SystemExit as exc:
            code = exc.code
            result["status"] = _exit_code(code if isinstance(code, int) else 1)
        except BaseException:
            result["status"] = Status.SIGABRT

    buffer = io.StringIO()
    worker = threading.Thread(target=target, daemon=True)
    with redirect_stdout(buffer):
        worker.start()
        worker.join(timeout)
    if worker.is_alive() or "status" not in result:
        test.status = Status.TIMEOUT
    else:
        test.status = result["status"]
    return buffer.getvalue()


def format_status(status: int) -> str:
    """Return the coloured label for an exit status."""
    if status == Status.OK:
        return f"{GREEN}[OK]{RESET}"
    if status == Status.KO:
        return f"{RED}[KO]{RESET}"
    if status == Status.TIMEOUT:
        return f"{RED}[TIMEOUT]{RESET}"
    for signal_status in _SIGNAL_STATUSES:
        if status == signal_status:
            return f"{RED}[{signal_status.name}]{RESET}"
    if status == Status.LEAKS:
        return f"{RED}[LEAKS]{RESET}"
    return f"{RED}[EXIT : {int(status)}]{RESET}"


def check_output(test: UnitTest, output: str) -> str:
    """Compare ``output`` with the expected output, or show it if none is set.

    A mismatch marks the test as failed.
    """
    if test.expected_output:
        if output == test.expected_output:
            return f"{GREEN}[OUTPUT : OK]{RESET}\n"
        test.status = Status.KO
        return (
            f"{RED}[OUTPUT : KO]\n"
            f"\t[OUTPUT]:\t[{output}]\n"
            f"\t[EXPECTED]:\t[{test.expected_output}]{RESET}\n"
        )
    text = "\n"
    if output:
        text += f"[OUTPUT] :\n{output}\n"
    return text


def format_test_output(test: UnitTest, number: int, output: str) -> str:
    """Return the report line for test ``number`` given what it printed."""
    line = f"{test.function}_{number:02d}: {test.test_name} \t\t"
    line += format_status(test.status)
    return line + check_output(test, output)


def format_results(succeeded: int, total: int) -> str:
    """Return the summary of a suite run."""
    verdict = f"{GREEN}[OK]{RESET}" if succeeded == total else f"{RED}[KO]{RESET}"
    return f"\n{BOLDWHITE}{succeeded} / {total} = {verdict}\n"


def create_log_file(function: str, directory: Union[str, Path] = ".") -> TextIO:
    """Open ``<function>.log`` in ``directory`` for writing, with its header."""
    log_file = open(Path(directory) / f"{function}.log", "w", encoding="utf-8")
    log_file.write(f"{BOLDWHITE}{function} TESTS:\n\n")
    return log_file


class TestSuite:
    """An ordered list of tests for one function, run together."""

    __test__ = False

    def __init__(
        self,
        function: str,
        log_dir: Union[str, Path] = ".",
        timeout: float = TIMEOUT_DELAY,
    ) -> None:
        self.function = function
        self.log_dir = Path(log_dir)
        self.timeout = timeout
        self._tests: list[UnitTest] = []

    def add(
        self,
        test_name: str,
        func: Callable[[], Optional[int]],
        expected_output: str = "",
    ) -> UnitTest:
        """Append a test and return it; an empty expected output disables the check."""
        test = UnitTest(self.function, test_name, func, expected_output)
        self._tests.append(test)
        return test

    def clear(self) -> None:
        """Remove every loaded test."""
        self._tests.clear()

    def run(self, out: Optional[TextIO] = None) -> tuple[int, int]:
        """Run and consume every test, report to ``out`` and the log file.

        Returns the number of tests that succeeded and the number run.
        """
        if out is None:
            out = sys.stdout
        out.write(f"{BOLDWHITE}{self.function} TESTS :{RESET}\n\n")
        succeeded = 0
        total = 0
        with create_log_file(self.function, self.log_dir) as log_file:
            try:
                for test in self._tests:
                    output = execute_test(test, self.timeout)
                    report = format_test_output(test, total, output)
                    out.write(report)
                    log_file.write(report)
                    if test.status == Status.OK:
                        succeeded += 1
                    total += 1
            finally:
                self.clear()
            summary = format_results(succeeded, total)
            out.write(summary)
            log_file.write(summary)
        return succeeded, total

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[UnitTest]:
        return iter(self._tests)