from typing import Any

from django.db import models

from monitoring.exceptions import ConcurrencyConflict


def save_changes(model: type[models.Model], pk, values: dict[str, Any]) -> None:
    """Write ``values`` onto row ``pk`` in one UPDATE.

    Raises :class:`ConcurrencyConflict` when no row was affected, i.e.
    the record disappeared between the caller's read and this write.
    """
    updated = model.objects.filter(pk=pk).update(**values)
    if updated == 0:
        raise ConcurrencyConflict(model.__name__, pk)


def record_exists(model: type[models.Model], pk) -> bool:
    return model.objects.filter(pk=pk).exists()
