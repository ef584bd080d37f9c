"""
Tests for structured logging helpers and the request logging middleware
"""

import pytest

from contactbook.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)
from contactbook.middleware import operation_name_from_document


class TestRequestContext:
    def teardown_method(self):
        clear_request_context()

    def test_set_and_clear(self):
        assert set_request_context("req-123") == "req-123"
        assert get_request_id() == "req-123"

        clear_request_context()

        assert get_request_id() is None

    def test_generated_when_missing(self):
        request_id = set_request_context()

        assert request_id
        assert get_request_id() == request_id

    def test_generated_ids_differ(self):
        assert generate_request_id() != generate_request_id()

    def test_filter_adds_request_id(self):
        set_request_context("req-456")

        event = RequestContextFilter()(None, "info", {"event": "hello"})

        assert event == {"event": "hello", "request_id": "req-456"}

    def test_filter_without_context(self):
        assert RequestContextFilter()(None, "info", {"event": "hello"}) == {"event": "hello"}


class TestConfigureLogging:
    @pytest.mark.parametrize("debug", [True, False])
    def test_logger_emits_after_configure(self, debug, capsys):
        configure_logging(debug=debug)

        get_logger("contactbook.tests").info("Contact created", contact_id=1)

        assert "Contact created" in capsys.readouterr().out


class TestOperationName:
    @pytest.mark.parametrize(
        "document,expected",
        [
            ("query AllContacts { contacts { id } }", "AllContacts"),
            ('mutation Remove { deleteContact(id: "1") }', "mutation:Remove"),
            ("{ contacts { id } }", "unnamed_operation"),
            ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        ],
    )
    def test_operation_name_from_document(self, document, expected):
        assert operation_name_from_document(document) == expected
