"""
Migration Admission Gate

Validates "start migration" requests for a cloud-media account before any
migration work is handed to the migration engine.

Supports:
- Field-level validation of cloud name, API key and API secret
- Aggregated, machine-readable violation reports
- Secret masking in logs and responses
- HTTP and command-line entry points
"""

__version__ = "0.1.0"
