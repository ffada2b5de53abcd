"""Base abstract models shared by the domain modules.

Provides:
- ``BaseModel``: auto-increment primary key + immutable ``created_at``.
- ``VersionedModel``: extends BaseModel with an optimistic-concurrency
  ``version`` counter.

Design decisions:
- ``created_at`` is stamped once on insert and never rewritten; ``save()``
  strips it from ``update_fields`` so a partial save cannot touch it.
- ``version`` is bumped by the repository inside a conditional
  ``UPDATE ... WHERE version = <loaded>``.  A zero row count means another
  writer got there first.
"""

from __future__ import annotations

from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with integer PK and creation timestamp."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True, editable=False)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Never let an ``update_fields`` save rewrite ``created_at``."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "created_at" in update_fields:
            kwargs["update_fields"] = [f for f in update_fields if f != "created_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Optimistic concurrency
# ---------------------------------------------------------------------------


class VersionedModel(BaseModel):
    """Abstract model carrying a monotonically increasing ``version``.

    - Starts at ``1`` on insert.
    - Repositories compare-and-increment it on every update.
    """

    version = models.PositiveIntegerField(default=1, editable=False)

    class Meta:
        abstract = True
