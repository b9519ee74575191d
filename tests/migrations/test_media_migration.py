from __future__ import annotations

from pathlib import Path

from medialist.models.lookup import MediaType


def test_media_migration_has_columns_and_types() -> None:
    repo_root = Path(__file__).resolve().parents[2]
    sql = (repo_root / "supabase" / "migrations" / "0001_create_media.sql").read_text()

    assert "public.media" in sql
    for column in ("user_id", "title", "creator", "year", "image_url", "review", "media_type", "created_at"):
        assert column in sql

    for media_type in MediaType:
        assert f"'{media_type.value}'" in sql

    assert "year text" in sql
