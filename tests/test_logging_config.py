import io

import pytest
from loguru import logger

from webdriver_http.classifier import classify
from webdriver_http.exceptions import UnknownRemoteError
from webdriver_http.logging_config import setup_logging
from webdriver_http.models import DecodedResponse


@pytest.fixture
def handler_ids():
    ids = []
    yield ids
    for handler_id in ids:
        logger.remove(handler_id)


def emit_package_records():
    """Debug record for a stale match, error record for an unknown payload"""
    classify(DecodedResponse({"value": {"message": "stale element reference: gone"}}))
    with pytest.raises(UnknownRemoteError):
        classify(DecodedResponse({"value": {"error": "unknown", "message": "weird"}}))


def test_console_sink_only_receives_package_records(handler_ids):
    stream = io.StringIO()
    handler_ids.extend(setup_logging(verbose=False, stream=stream))

    logger.info("host application record")
    emit_package_records()

    out = stream.getvalue()
    assert "Unrecognized remote error" in out
    assert "webdriver_http.classifier" in out
    assert "stale_reference" not in out, "Debug records need verbose=True"
    assert "host application record" not in out


def test_verbose_console_includes_debug(handler_ids):
    stream = io.StringIO()
    handler_ids.extend(setup_logging(verbose=True, stream=stream))

    emit_package_records()

    assert "stale_reference" in stream.getvalue()


def test_file_sink_writes_debug_trace(tmp_path, handler_ids):
    log_file = tmp_path / "logs" / "webdriver.log"
    ids = setup_logging(log_file=log_file, stream=io.StringIO())
    assert len(ids) == 2

    emit_package_records()
    logger.info("host application record")
    logger.complete()
    for handler_id in ids:
        logger.remove(handler_id)

    text = log_file.read_text(encoding="utf-8")
    assert "stale_reference" in text
    assert "Unrecognized remote error" in text
    assert "host application record" not in text


def test_existing_handlers_are_kept(handler_ids):
    host_stream = io.StringIO()
    host_id = logger.add(host_stream, format="{message}")
    handler_ids.append(host_id)

    handler_ids.extend(setup_logging(stream=io.StringIO()))
    logger.info("host still logging")

    assert "host still logging" in host_stream.getvalue()
