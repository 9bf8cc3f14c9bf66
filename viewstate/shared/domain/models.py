"""Domain models shown by the demo screens."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class UserModel(BaseModel):
    """User fetched by the user screen."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None


class InfoErrorModel(BaseModel):
    """Generic notice describing the outcome of a user-triggered action.

    Mirrors the payload an API returns alongside a status code; the screen
    shows ``title`` and ``description`` as a transient notice.
    """
    model_config = ConfigDict(frozen=True)

    status_code: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_json(cls, json: Dict[str, Any]) -> "InfoErrorModel":
        """Build from a decoded JSON object; unknown keys are ignored."""
        return cls(
            status_code=json.get("status_code"),
            title=json.get("title"),
            description=json.get("description"),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "title": self.title,
            "description": self.description,
        }

    def copy_with(
        self,
        status_code: Optional[int] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "InfoErrorModel":
        """Copy, replacing only the fields that are given (not None)."""
        return InfoErrorModel(
            status_code=status_code if status_code is not None else self.status_code,
            title=title if title is not None else self.title,
            description=description if description is not None else self.description,
        )

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class CounterState(BaseModel):
    """Two independent counters driven by the counter screen."""
    model_config = ConfigDict(frozen=True)

    number1: int = 0
    number2: int = 1


# Notices shown after a refresh of the user screen
USER_UPDATED_NOTICE = InfoErrorModel(status_code=200, title="Success", description="Updated user.")
USER_NOT_UPDATED_NOTICE = InfoErrorModel(status_code=400, title="Error", description="User not updated.")
