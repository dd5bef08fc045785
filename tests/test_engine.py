"""Tests for the default migration engine."""

import logging

from migration_gate.engine import AcknowledgingEngine
from migration_gate.models import MigrationRequest


def test_acknowledging_engine_keeps_no_requests():
    engine = AcknowledgingEngine()
    request = MigrationRequest(cloud_name="acme", api_key="k1", api_secret="0123456789")

    tickets = [engine.start_migration(request) for _ in range(100)]

    assert len({t.migration_id for t in tickets}) == 100
    assert vars(engine) == {}


def test_acknowledging_engine_logs_masked_secret(caplog):
    caplog.set_level(logging.INFO, logger="migration_gate")
    request = MigrationRequest(cloud_name="acme", api_key="k1", api_secret="0123456789")

    ticket = AcknowledgingEngine().start_migration(request)

    assert ticket.migration_id in caplog.text
    assert "****6789" in caplog.text
    assert "0123456789" not in caplog.text
