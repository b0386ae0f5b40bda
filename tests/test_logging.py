import logging

from halberd.core.link import parse_links
from halberd.core.logging import LogfmtFormatter, setup_logging
from halberd.core.resource import Resource


def test_model_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="halberd")
    res = Resource({}, "/a")
    res.embed("items", [{"n": 1}, {"n": 2}])
    parse_links({"self": "/x"})

    attached = [r for r in caplog.records if r.getMessage() == "hal.link_attached"]
    assert attached and attached[0].rel == "self"
    embedded = next(r for r in caplog.records if r.getMessage() == "hal.embedded")
    assert embedded.rel == "items"
    assert embedded.count == 2
    parsed = next(r for r in caplog.records if r.getMessage() == "hal.links_parsed")
    assert parsed.count == 1


def test_logfmt_formatter_renders_extras_in_order():
    record = logging.makeLogRecord(
        {
            "name": "halberd.resource",
            "levelno": logging.DEBUG,
            "levelname": "DEBUG",
            "msg": "hal.embedded",
        }
    )
    record.rel = "order items"
    record.count = 2
    record.source = None

    line = LogfmtFormatter().format(record)
    assert line == (
        'level=debug logger=halberd.resource event=hal.embedded rel="order items" '
        "count=2"
    )


def test_logfmt_formatter_without_extras():
    record = logging.makeLogRecord(
        {"name": "halberd.cli", "levelname": "INFO", "msg": "hal_rendered"}
    )
    assert LogfmtFormatter().format(record) == (
        "level=info logger=halberd.cli event=hal_rendered"
    )


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("warning")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, LogfmtFormatter)
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
