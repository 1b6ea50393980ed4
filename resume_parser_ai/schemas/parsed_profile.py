"""Structured candidate profile extracted from an uploaded resume."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExperienceEntry(BaseModel):
    """One work experience block assembled from the experience section."""

    model_config = ConfigDict(populate_by_name=True)

    company: str = Field(default="", description="Employer name")
    position: str = Field(default="", description="Job title")
    start_date: str = Field(default="", alias="startDate", description="Start year (e.g. '2020')")
    end_date: str = Field(default="", alias="endDate", description="End year or 'Présent' if ongoing")
    description: Optional[str] = Field(default=None, description="First descriptive line of the block")


class EducationEntry(BaseModel):
    """One education block assembled from the education section."""

    model_config = ConfigDict(populate_by_name=True)

    institution: str = Field(default="", description="School or university")
    degree: str = Field(default="", description="Degree or diploma title")
    field: Optional[str] = Field(default=None, description="Field of study or specialization")
    graduation_year: str = Field(default="", alias="graduationYear", description="Graduation year (e.g. '2016')")


class ParsedProfile(BaseModel):
    """Best-effort structured profile produced by the resume parsing pipeline."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName", description="Given name")
    last_name: Optional[str] = Field(default=None, alias="lastName", description="Family name(s)")
    email: Optional[str] = Field(default=None, description="First email address found")
    phone: Optional[str] = Field(default=None, description="First phone number, separators stripped")
    linkedin: Optional[str] = Field(default=None, alias="linkedIn", description="LinkedIn profile URL as matched")
    summary: Optional[str] = Field(default=None, description="Profile/summary paragraph")
    skills: List[str] = Field(default_factory=list, description="Dictionary skills found, in dictionary order")
    work_experience: List[ExperienceEntry] = Field(
        default_factory=list, alias="workExperience", description="Work history in document order"
    )
    education: List[EducationEntry] = Field(default_factory=list, description="Education in document order")
