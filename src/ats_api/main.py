from __future__ import annotations

from ats_api.app import create_app

app = create_app()
