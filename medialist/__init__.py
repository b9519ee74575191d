"""
Shared Medialist backend library code.

This package is intended to hold code that is reused across:
- the FastAPI app in `api/`
- CLI scripts in `scripts/`

App entrypoints (FastAPI routers, CLI scripts) should live outside this package and
import from `medialist` rather than the other way around.
"""
