"""Helpers shared by ingestion and deletion: dedup and ownership filtering."""

from collections.abc import Iterable, Sequence

from accounts.domain import Principal, Role
from photos.domain import IncomingPhoto, Photo


def partition_duplicates(
    incoming: Sequence[IncomingPhoto], existing_names: Iterable[str]
) -> tuple[list[IncomingPhoto], list[str]]:
    """Split a batch into files to persist and names to skip.

    A name is a duplicate if it is already stored for the uploader in the
    event, or if an earlier file in the same batch carries it.
    """
    seen = set(existing_names)
    accepted: list[IncomingPhoto] = []
    skipped: list[str] = []
    for photo in incoming:
        if photo.original_name in seen:
            skipped.append(photo.original_name)
            continue
        seen.add(photo.original_name)
        accepted.append(photo)
    return accepted, skipped


def select_deletable(photos: Iterable[Photo], caller: Principal) -> list[Photo]:
    """Admins may delete anything; photographers only their own uploads."""
    if caller.is_admin:
        return list(photos)
    if caller.role is Role.PHOTOGRAPHER:
        return [photo for photo in photos if photo.user_id == caller.user_id]
    return []
