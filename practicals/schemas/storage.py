from pydantic import BaseModel, Field
from typing import List


class MigrationReport(BaseModel):
    source: str
    target: str
    dry_run: bool = False
    copied: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list)
    urls_rewritten: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed
