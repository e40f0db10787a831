"""Result records produced by a validation run."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

CSV_HEADER = ["URL", "Status", "Effective URL", "Title"]


class LinkValidationResult(BaseModel):
    """Outcome of validating one discovered link.

    `status_code == 0` means no response was received at all; in that case
    `effective_url` equals `url` and `title` starts with ``"Error: "``.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    status_code: int
    effective_url: str
    title: str

    @property
    def is_transport_failure(self) -> bool:
        return self.status_code == 0

    def to_row(self) -> List[str]:
        return [self.url, str(self.status_code), self.effective_url, self.title]
