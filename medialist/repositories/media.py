from __future__ import annotations

from typing import Any, Mapping

from supabase import Client

from medialist.models.lookup import MediaType

MEDIA_SCHEMA = "public"
MEDIA_TABLE = "media"


class MediaRepositoryError(RuntimeError):
    pass


def _raise_for_supabase_error(response: Any, context: str) -> None:
    if hasattr(response, "error") and response.error:
        raise MediaRepositoryError(f"Supabase error during {context}: {response.error}")


def _media_table(db: Client):
    return db.schema(MEDIA_SCHEMA).table(MEDIA_TABLE)


def list_media(db: Client, *, media_type: MediaType | None = None) -> list[dict[str, Any]]:
    query = _media_table(db).select("*")
    if media_type is not None:
        query = query.eq("media_type", media_type.value)
    response = query.order("created_at", desc=True).execute()
    _raise_for_supabase_error(response, "listing media")
    data = response.data or []
    return [row for row in data if isinstance(row, dict)] if isinstance(data, list) else []


def find_media_by_id(db: Client, media_id: str) -> dict[str, Any] | None:
    response = _media_table(db).select("*").eq("id", str(media_id)).limit(1).execute()
    _raise_for_supabase_error(response, "fetching media")
    data = response.data or []
    if isinstance(data, list) and data:
        return data[0]
    return None


def insert_media(db: Client, payload: Mapping[str, Any]) -> dict[str, Any]:
    response = _media_table(db).insert(dict(payload)).execute()
    _raise_for_supabase_error(response, "inserting media")
    data = response.data or []
    if isinstance(data, list) and data:
        return data[0]
    raise MediaRepositoryError("Supabase insert returned no data for media.")


def update_media(db: Client, media_id: str, owner_id: str, patch: Mapping[str, Any]) -> dict[str, Any]:
    response = (
        _media_table(db)
        .update(dict(patch))
        .eq("id", str(media_id))
        .eq("user_id", owner_id)
        .execute()
    )
    _raise_for_supabase_error(response, "updating media")
    data = response.data or []
    if isinstance(data, list) and data:
        return data[0]
    raise MediaRepositoryError("Supabase update returned no data for media.")


def delete_media(db: Client, media_id: str, owner_id: str) -> None:
    response = _media_table(db).delete().eq("id", str(media_id)).eq("user_id", owner_id).execute()
    _raise_for_supabase_error(response, "deleting media")
