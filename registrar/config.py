"""
Configuration models for the Registrar package.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .core.enums import (
    DEFAULT_FAULT_CODE, DEFAULT_PLACEHOLDER_ID, LogFormat, StudentIdPolicy
)
from .core.exceptions import ConfigurationError
from .core.failures import CourseRecord


class RequiredCourse(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    number: int = Field(0, ge=0)

    def to_record(self) -> CourseRecord:
        return CourseRecord(self.title, self.number)


class GraduationRequirements(BaseModel):
    """Thresholds applied by the graduation checks."""
    min_gpa: float = Field(2.0, ge=0.0, le=4.0)
    required_credits: int = Field(0, ge=0)
    required_courses: List[RequiredCourse] = Field(default_factory=list)
    fault_code: int = DEFAULT_FAULT_CODE

    def course_records(self) -> List[CourseRecord]:
        return [course.to_record() for course in self.required_courses]


class RegistrarConfig(BaseModel):
    requirements: GraduationRequirements = Field(default_factory=GraduationRequirements)
    id_policy: StudentIdPolicy = StudentIdPolicy.PLACEHOLDER
    placeholder_id: str = DEFAULT_PLACEHOLDER_ID
    id_offset: int = Field(100, ge=0)
    log_level: str = Field("INFO", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')
    log_format: LogFormat = LogFormat.CONSOLE

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_config(path: Optional[Union[str, Path]] = None,
                overrides: Optional[Dict[str, Any]] = None) -> RegistrarConfig:
    """Build a config from an optional JSON file plus keyword overrides.

    Overrides with a value of None are ignored so CLI options left unset do
    not mask values from the file.
    """
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration from {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {path} must be a JSON object")
    
    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value
    
    try:
        return RegistrarConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError("Invalid configuration", details={'errors': e.errors()}) from e
