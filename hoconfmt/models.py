from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from .rules import EXIT_ERROR, EXIT_OK


class FormatOptions(BaseModel):
    list: bool = False
    write: bool = False
    diff: bool = False
    all_errors: bool = False

    @property
    def prints_result(self) -> bool:
        # default mode: no list, write or diff flag set
        return not (self.list or self.write or self.diff)


class FileOutcome(BaseModel):
    path: str
    changed: bool = False
    skipped: bool = False
    error: Optional[str] = None


class BatchResult(BaseModel):
    outcomes: List[FileOutcome] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for o in self.outcomes if o.error is not None)

    @property
    def changed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.changed)

    @property
    def exit_code(self) -> int:
        return EXIT_ERROR if self.error_count else EXIT_OK


class FormattedConf(BaseModel):
    sha256: str
    content_b64: str


class FormatReport(BaseModel):
    changed: bool
    indent_tabs: int = Field(default=0, examples=[1])
    leading_blank_bytes: int = 0
    encoding: Optional[str] = Field(default=None, examples=["ascii"])


class FormatResponse(BaseModel):
    formatted: FormattedConf
    report: FormatReport
    diff: Optional[str] = None

class HealthResponse(BaseModel):
    ok: bool = True
