"""Client profile persistence.

Profiles are kept as a JSON array under a single key of a small durable
key/value store: a JSON object file on the local machine.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from .config import settings
from .schemas import ClientProfile
from .utils.errors import ProfileStoreError

logger = logging.getLogger(__name__)


class LocalStorage:
    """String-keyed, string-valued store backed by one JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or settings.LOCAL_STORAGE_PATH).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{self.path} holds a non-string value under {key!r}")
        return value

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing the file atomically."""
        try:
            data = self._read()
        except ValueError:
            logger.warning(f"[storage] Discarding unreadable storage file {self.path}")
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class ProfileStore:
    """Named client profiles, unique by client name."""

    def __init__(self, storage: Optional[LocalStorage] = None, key: Optional[str] = None):
        self.storage = storage or LocalStorage()
        self.key = key or settings.PROFILES_STORAGE_KEY

    def load_profiles(self) -> List[ClientProfile]:
        """Return saved profiles; unreadable data yields an empty list."""
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return []
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError("saved profiles are not a list")
            return [ClientProfile.model_validate(item) for item in items]
        except (OSError, TypeError, ValueError, ValidationError) as e:
            logger.error(f"[profiles] Failed to load profiles from storage: {e}")
            return []

    def save_profiles(self, profiles: List[ClientProfile]) -> None:
        """
        Persist the full profile list

        Raises:
            ProfileStoreError: If the storage file cannot be written
        """
        payload = json.dumps([p.model_dump(by_alias=True) for p in profiles])
        try:
            self.storage.set_item(self.key, payload)
        except OSError as e:
            logger.error(f"[profiles] Failed to save profiles to storage: {e}")
            raise ProfileStoreError(f"Failed to save profiles: {e}") from e

    def save_profile(self, profile: ClientProfile) -> List[ClientProfile]:
        """Insert or replace the profile with the same client name.

        Returns:
            The updated profile list

        Raises:
            ValueError: If the profile has no client name
        """
        name = profile.client_name.strip()
        if not name:
            raise ValueError("Please enter a Client Name to save a profile.")

        profiles = self.load_profiles()
        for index, existing in enumerate(profiles):
            if existing.client_name == profile.client_name:
                profiles[index] = profile
                break
        else:
            profiles.append(profile)

        self.save_profiles(profiles)
        logger.info("[profiles] Saved profile", extra={"profile_count": len(profiles)})
        return profiles

    def get_profile(self, client_name: str) -> Optional[ClientProfile]:
        for profile in self.load_profiles():
            if profile.client_name == client_name:
                return profile
        return None


__all__ = ["LocalStorage", "ProfileStore"]
