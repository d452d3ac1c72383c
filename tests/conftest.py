"""
Shared pytest fixtures and configuration for glideschema tests.
"""

import pytest

from glideschema import ColumnDescriptor, construct_schema


@pytest.fixture(scope="session")
def incident_columns():
    """Column descriptors for an incident table, one per supported source type."""
    return [
        ColumnDescriptor("sys_id", "guid"),
        ColumnDescriptor("number", "string"),
        ColumnDescriptor("priority", "integer"),
        ColumnDescriptor("active", "boolean"),
        ColumnDescriptor("opened_at", "glide_date_time"),
        ColumnDescriptor("due_date", "glide_date"),
        ColumnDescriptor("business_duration", "glide_time"),
        ColumnDescriptor("cost", "decimal"),
        ColumnDescriptor("caller_id", "reference"),
    ]


@pytest.fixture(scope="session")
def incident_schema(incident_columns):
    """RecordSchema built from the incident columns with default settings."""
    return construct_schema("incident", incident_columns)
