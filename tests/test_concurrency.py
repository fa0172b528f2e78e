"""Thread-safety tests for the logger"""

import io
import re
import threading

from dual_logger import LoggerConfiguration, LoggerCore, Severity

THREADS = 8
MESSAGES_PER_THREAD = 250

PLAIN_LINE = re.compile(r"^\[INFO\] worker-\d+ message-\d+$")
ANY_LINE = re.compile(
    r"^(\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] )?"
    r"\[INFO\] (\[worker\.py:\d+\] )?worker-\d+ message-\d+$"
)


def run_workers(target):
    threads = [
        threading.Thread(target=target, args=(n,), name=f"worker-{n}")
        for n in range(THREADS)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()


class TestConcurrentEmission:
    """Stress the single critical section."""

    def setup_method(self):
        self.console = io.StringIO()

    def make_logger(self, tmp_path, **overrides):
        settings = dict(
            min_severity=Severity.DEBUG,
            timestamps_enabled=False,
            source_info_enabled=False,
            log_directory=tmp_path,
        )
        settings.update(overrides)
        logger = LoggerCore(LoggerConfiguration(**settings), console_stream=self.console)
        logger.initialize()
        return logger

    def test_lines_are_never_interleaved(self, tmp_path):
        logger = self.make_logger(tmp_path)

        def worker(n):
            for i in range(MESSAGES_PER_THREAD):
                logger.info(f"worker-{n} message-{i}")

        run_workers(worker)

        console = self.console.getvalue().splitlines()
        on_disk = logger.log_path.read_text(encoding="utf-8").splitlines()
        expected = THREADS * MESSAGES_PER_THREAD

        assert len(console) == expected
        assert len(on_disk) == expected
        assert all(PLAIN_LINE.match(line) for line in console)
        assert all(PLAIN_LINE.match(line) for line in on_disk)
        assert sorted(console) == sorted(on_disk)
        assert logger.get_metrics()["emitted"] == expected
        logger.shutdown()

    def test_configuration_changes_are_atomic(self, tmp_path):
        logger = self.make_logger(tmp_path)
        stop = threading.Event()

        def toggler():
            enabled = False
            while not stop.is_set():
                enabled = not enabled
                logger.enable_timestamps(enabled)
                logger.enable_source_info(enabled)

        toggle_thread = threading.Thread(target=toggler)
        toggle_thread.start()

        def worker(n):
            for i in range(MESSAGES_PER_THREAD):
                logger.info(f"worker-{n} message-{i}", "worker.py", i)

        try:
            run_workers(worker)
        finally:
            stop.set()
            toggle_thread.join()

        lines = logger.log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == THREADS * MESSAGES_PER_THREAD
        assert all(ANY_LINE.match(line) for line in lines)
        logger.shutdown()

    def test_racing_initialize_opens_one_file(self, tmp_path):
        logger = LoggerCore(
            LoggerConfiguration(log_directory=tmp_path / "logs"),
            console_stream=self.console,
        )
        barrier = threading.Barrier(THREADS)
        paths = []

        def worker(n):
            barrier.wait()
            paths.append(logger.initialize())

        run_workers(worker)

        assert len(set(paths)) == 1
        assert len(list((tmp_path / "logs").iterdir())) == 1
        logger.shutdown()
