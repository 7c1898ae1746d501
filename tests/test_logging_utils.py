import logging

from face_drawer import configure_logging, get_logger


def test_loggers_live_under_the_package():
    assert get_logger("face_drawer.core").name == "face_drawer.core"
    assert get_logger("tools").name == "face_drawer.tools"
    assert get_logger("face_drawer.parser").level == logging.NOTSET


def test_configure_logging_installs_one_handler():
    process_root = logging.getLogger()
    before = (list(process_root.handlers), process_root.level)

    root = configure_logging("warning")
    configure_logging("debug")

    stream_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert root.level == logging.DEBUG
    assert not any(isinstance(h, logging.NullHandler) for h in root.handlers)
    assert (list(process_root.handlers), process_root.level) == before
    assert root.propagate is False


def test_configured_records_stay_off_the_process_root(capsys):
    seen = []

    class Collect(logging.Handler):
        def emit(self, record):
            seen.append(record)

    collector = Collect()
    process_root = logging.getLogger()
    process_root.addHandler(collector)
    try:
        configure_logging("info")
        get_logger("core").info("drawn once")
    finally:
        process_root.removeHandler(collector)

    assert seen == []
    assert capsys.readouterr().out.count("drawn once") == 1
