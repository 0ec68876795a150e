"""Shared test constants and post builders."""

from __future__ import annotations

import json
from pathlib import Path

FIXTURE_SITE = Path(__file__).parent / "fixtures" / "site"

INTRO_ID = "2025-05-26-program-verification-intro"
HYPER_ID = "2025-08-09-hyperproperties"


def post_text(title: str, date: str, body: str = "Body.\n", **extra: str) -> str:
    """Build a post file with the given front matter."""
    lines = ["---", f"title: {json.dumps(title)}", f"date: {date}"]
    lines.extend(f"{key}: {value}" for key, value in extra.items())
    lines.append("---")
    return "\n".join(lines) + "\n" + body
