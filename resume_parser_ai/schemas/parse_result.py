"""Outcome of a resume parse: the profile plus manual-entry flags."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.parsed_profile import ParsedProfile


class ParseResult(BaseModel):
    """Successful parse. Sentinel results carry an empty profile and a flag."""

    model_config = ConfigDict(populate_by_name=True)

    profile: ParsedProfile = Field(default_factory=ParsedProfile, description="Extracted profile")
    requires_ocr: bool = Field(default=False, alias="requiresOCR", description="Image input; OCR not performed")
    requires_manual_entry: bool = Field(
        default=False, alias="requiresManualEntry", description="No text could be extracted"
    )
    message: Optional[str] = Field(default=None, description="Human-readable note for sentinel results")
    raw_text_preview: str = Field(default="", alias="rawText", description="Start of the decoded text, for debugging")
