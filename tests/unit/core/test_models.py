"""Unit tests for BaseModel and VersionedModel.

Uses a concrete test model created via Django's SchemaEditor so we can
exercise the abstract classes against a real database.
"""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone

import pytest
from freezegun import freeze_time

from django.db import connection, models

from modules.core.models import BaseModel, VersionedModel

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Concrete model for testing (abstract models can't be instantiated)
# ---------------------------------------------------------------------------


class ConcreteVersionedModel(VersionedModel):
    name = models.CharField(max_length=100)

    class Meta(VersionedModel.Meta):
        app_label = "core"
        db_table = "test_concrete_versioned"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def _test_tables(django_db_setup, django_db_blocker):
    """Create DB table for the concrete test model (idempotent for --reuse-db)."""
    with django_db_blocker.unblock():
        with connection.schema_editor() as editor:
            existing = connection.introspection.table_names()
            if ConcreteVersionedModel._meta.db_table not in existing:
                editor.create_model(ConcreteVersionedModel)


@pytest.fixture(autouse=True)
def _use_test_tables(_test_tables):
    """Ensure test tables exist for every test in this module."""


# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class TestBaseModel:
    def test_is_abstract(self):
        assert BaseModel._meta.abstract is True

    def test_id_is_integer_assigned_on_insert(self):
        first = ConcreteVersionedModel.objects.create(name="a")
        second = ConcreteVersionedModel.objects.create(name="b")
        assert isinstance(first.id, int)
        assert second.id > first.id

    @freeze_time("2024-08-01 13:24:56")
    def test_created_at_stamped_on_insert(self):
        obj = ConcreteVersionedModel.objects.create(name="a")
        assert obj.created_at == datetime(2024, 8, 1, 13, 24, 56, tzinfo=dt_timezone.utc)

    def test_created_at_not_rewritten_by_update_fields(self):
        with freeze_time("2024-08-01 10:00:00"):
            obj = ConcreteVersionedModel.objects.create(name="a")
        original = obj.created_at

        with freeze_time("2025-01-01 10:00:00"):
            obj.created_at = datetime(2030, 1, 1, tzinfo=dt_timezone.utc)
            obj.name = "b"
            obj.save(update_fields=["name", "created_at"])

        obj.refresh_from_db()
        assert obj.name == "b"
        assert obj.created_at == original


# ---------------------------------------------------------------------------
# VersionedModel
# ---------------------------------------------------------------------------


class TestVersionedModel:
    def test_version_starts_at_one(self):
        obj = ConcreteVersionedModel.objects.create(name="a")
        assert obj.version == 1

    def test_version_is_not_editable(self):
        field = ConcreteVersionedModel._meta.get_field("version")
        assert field.editable is False
