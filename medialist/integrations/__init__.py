"""
External catalog integrations (Google Books, TMDb, RAWG, Last.fm).

New provider clients should live under this namespace so they remain
decoupled from app entrypoints (`api/`) and CLI scripts (`scripts/`).
"""
