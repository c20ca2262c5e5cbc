import logging

from utils import ClassLogger, ColoredFormatter, HybridLogger, OnceInMs


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_once_in_ms_opens_first_then_throttles():
    clock = FakeClock()
    gate = OnceInMs(1000, clock=clock)

    assert gate.should_execute()
    assert not gate.should_execute()

    clock.now += 0.5
    assert not gate.should_execute()
    assert gate.remaining_ms() == 500

    clock.now += 0.5
    assert gate.should_execute()


def test_once_in_ms_reset():
    gate = OnceInMs(60000, clock=FakeClock())
    gate.should_execute()

    gate.reset()

    assert gate.remaining_ms() == 0
    assert gate.should_execute()


def test_class_logger_filters_by_level(capsys):
    hybrid = HybridLogger("UtilsTestFilter")
    quiet = hybrid.get_class_logger("Quiet", logging.WARNING)

    quiet.info("not shown")
    quiet.warning("shown")
    hybrid.cleanup()

    out = capsys.readouterr().out
    assert "not shown" not in out
    assert "[WARNING] [Quiet] shown" in out


def test_derived_logger_shares_handlers(capsys):
    hybrid = HybridLogger("UtilsTestDerived")
    child = hybrid.get_main_logger(logging.DEBUG).create_class_logger("Child")

    assert isinstance(child, ClassLogger)
    child.debug("from child")
    hybrid.cleanup()

    assert "[DEBUG] [Child] from child" in capsys.readouterr().out


def test_error_with_exception_reports_location(capsys):
    hybrid = HybridLogger("UtilsTestError")
    logger = hybrid.get_main_logger()

    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        logger.error("failed", exception=e)
    hybrid.cleanup()

    out = capsys.readouterr().out
    assert "failed | Type: RuntimeError" in out
    assert "test_utils.py" in out


def test_log_dir_adds_file_handler(tmp_path):
    with HybridLogger("UtilsTestFile", log_dir=str(tmp_path / "logs")) as logger:
        logger.info("written to file")

    log_files = list((tmp_path / "logs").glob("UtilsTestFile_*.log"))
    assert len(log_files) == 1
    assert "written to file" in log_files[0].read_text(encoding="utf-8")


def test_formatter_colors_only_when_asked():
    record = logging.LogRecord("x", logging.ERROR, "", 0, "msg", (), None)

    assert ColoredFormatter(use_colors=True).format(record).startswith("\033[91m")
    assert "\033[" not in ColoredFormatter(use_colors=False).format(record)
    assert "[Main] msg" in ColoredFormatter().format(record)
