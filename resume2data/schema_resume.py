# canonical schema (zero values everywhere – never None)
from __future__ import annotations
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(_Record):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    summary: str = ""


class Skill(_Record):
    name: str


class SkillCategory(_Record):
    name: str
    skills: List[Skill] = Field(default_factory=list)


class Experience(_Record):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = "Present"
    location: str = ""
    description: str = ""
    achievements: List[str] = Field(default_factory=lambda: [""])


class Education(_Record):
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""


class Project(_Record):
    name: str = ""
    description: str = ""
    technologies: str = ""
    link: str = ""
    start_date: str = ""
    end_date: str = ""
    achievements: List[str] = Field(default_factory=lambda: [""])


class ResumeData(_Record):
    """Partial résumé record; unset fields keep their zero value."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    skills: List[SkillCategory] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase dict in the shape the form layer consumes."""
        return self.model_dump(by_alias=True)
