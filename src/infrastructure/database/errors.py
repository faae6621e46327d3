"""Translation of SQLAlchemy errors into application errors."""

from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from core.exceptions import UniqueConstraintError


@contextmanager
def translate_integrity_errors() -> Iterator[None]:
    """Re-raise store constraint violations as ``UniqueConstraintError``.

    The original driver message is kept so callers can tell which
    constraint fired (e.g. ``name_key`` or ``email_key``). A version
    mismatch on an optimistic-locked row is reported the same way, tagged
    ``stale_version``.
    """
    try:
        yield
    except IntegrityError as exc:
        raise UniqueConstraintError(str(exc.orig)) from exc
    except StaleDataError as exc:
        raise UniqueConstraintError(f"stale_version: {exc}") from exc


def ensure_version(current: int, expected: int, row_id: UUID) -> None:
    """Reject writes built from a snapshot older than the stored row."""
    if current != expected:
        raise StaleDataError(
            f"row {row_id} is at version {current}, write was based on {expected}"
        )
