import logging
from dataclasses import dataclass

import pytest
from pydantic import TypeAdapter, ValidationError

from corenetworking.logger import NetworkLogger, NetworkLoggerConfig
from corenetworking.request import Request


@dataclass
class Fact:
    fact: str


REQUEST = Request.get(
    "https://catfact.ninja/fact",
    params=[("max_length", "10")],
    headers={"Authorization": "Bearer hunter2", "Accept": "application/json"},
)


def test_verbose_logs_at_info(caplog: pytest.LogCaptureFixture) -> None:
    network_logger = NetworkLogger(NetworkLoggerConfig.verbose())
    with caplog.at_level(logging.INFO, logger="corenetworking"):
        network_logger.log_request(REQUEST)
        network_logger.log_response(200, REQUEST)
        network_logger.log_decode_success(Fact("x"), Fact, b'{"fact": "x"}')

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 3
    assert messages[0].startswith(
        "sending GET https://catfact.ninja/fact?max_length=10"
    )
    assert "hunter2" not in messages[0]
    assert "application/json" in messages[0]
    assert messages[1] == "received 200 for GET https://catfact.ninja/fact?max_length=10"
    assert messages[2] == "decoded Fact from 13 bytes: Fact(fact='x')"
    assert all(record.levelno == logging.INFO for record in caplog.records)


def test_default_is_verbose(caplog: pytest.LogCaptureFixture) -> None:
    assert NetworkLogger().config == NetworkLoggerConfig.verbose()
    with caplog.at_level(logging.INFO, logger="corenetworking"):
        NetworkLogger().log_request(REQUEST)
        NetworkLogger().log_response(200, REQUEST)
    assert [record.levelno for record in caplog.records] == [logging.INFO] * 2


def test_quiet_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    quiet = NetworkLogger(NetworkLoggerConfig.quiet())
    with caplog.at_level(logging.INFO, logger="corenetworking"):
        quiet.log_request(REQUEST)
    assert caplog.records == []

    with caplog.at_level(logging.DEBUG, logger="corenetworking"):
        quiet.log_request(REQUEST)
    assert [record.levelno for record in caplog.records] == [logging.DEBUG]


def test_decode_failure_is_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(ValidationError) as error:
        TypeAdapter(Fact).validate_json(b"{}")

    with caplog.at_level(logging.WARNING, logger="corenetworking"):
        NetworkLogger().log_decode_failure(error.value, Fact, b"{}")

    [record] = caplog.records
    assert record.levelno == logging.WARNING
    assert "failed to decode Fact from b'{}'" in record.getMessage()


def test_response_logging_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    network_logger = NetworkLogger(NetworkLoggerConfig.verbose(log_responses=False))
    with caplog.at_level(logging.DEBUG, logger="corenetworking"):
        network_logger.log_request(REQUEST)
        network_logger.log_response(200, REQUEST)
        network_logger.log_decode_success(Fact("x"), Fact, b"")
    assert len(caplog.records) == 1


def test_silent(caplog: pytest.LogCaptureFixture) -> None:
    network_logger = NetworkLogger(NetworkLoggerConfig.silent())
    with caplog.at_level(logging.DEBUG, logger="corenetworking"):
        network_logger.log_request(REQUEST)
        network_logger.log_response(500, REQUEST)
    assert caplog.records == []
