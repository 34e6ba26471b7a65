from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict
import tomllib

from pydantic import TypeAdapter

from .config import Profile
from .errors import validate_tagged

_PROFILE_ADAPTER: TypeAdapter[Profile] = TypeAdapter(Profile)


class ProfileFrontend:
    """Load profile documents (JSON or TOML) into Profile models."""

    def load_json(self, path: str | Path) -> Dict[str, Any]:
        path = Path(path)
        return json.loads(path.read_text(encoding="utf-8"))

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def load(self, path: str | Path) -> Dict[str, Any]:
        """Load by file suffix; anything but `.toml` is read as JSON."""

        path = Path(path)
        if path.suffix.lower() == ".toml":
            return self.load_toml(path)
        return self.load_json(path)

    def parse_profile(self, document: Dict[str, Any]) -> Profile:
        return validate_tagged(_PROFILE_ADAPTER, document)
