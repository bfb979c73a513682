"""Base contract for models that are sent to the API as JSON."""

from __future__ import annotations

import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, PrivateAttr


class PayloadModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        populate_by_name=True,
    )

    _sealed: bool = PrivateAttr(default=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and self._sealed:
            raise ValueError(
                f"{type(self).__name__} belongs to a built image and can no longer be changed."
            )
        super().__setattr__(name, value)

    def _seal(self) -> None:
        """Reject every later field assignment, including ``with_*`` setters."""
        self._sealed = True

    def _require_complete(self) -> None:
        """Hook for checks that only apply once a model is about to be sent."""

    def to_payload(self) -> Dict[str, Any]:
        self._require_complete()
        validated = type(self).model_validate(self.model_dump())
        return validated.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), separators=(",", ":"))
