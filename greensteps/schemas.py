"""Request payload validation.

Update models list every mutable field explicitly; callers apply only the
fields that were present in the payload (``provided_fields``). Keys outside the
model, including ``id``, ``userId`` and ``createdAt``, are dropped.
"""
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .errors import ValidationError

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Matches the String(32) measurement and limit columns
MAX_NUMBER_LENGTH = 32

# JSON strings or numbers; booleans are rejected
NumberText = Optional[Union[StrictStr, StrictInt, StrictFloat]]

DEFAULT_SETTINGS = {
    "electricity_limit": "10",
    "electricity_unit": "items",
    "water_limit": "14",
    "water_unit": "L",
    "weekly_alerts": True,
    "threshold_alerts": True,
    "saving_tips": True,
}


def _decimal_text(value):
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("must be a decimal number")
    text = str(value)
    if not text.strip():
        return None
    if len(text) > MAX_NUMBER_LENGTH:
        raise ValueError(f"must be at most {MAX_NUMBER_LENGTH} characters")
    try:
        number = Decimal(text)
    except InvalidOperation:
        raise ValueError("must be a decimal number")
    if not number.is_finite() or number < 0:
        raise ValueError("must be a non-negative decimal number")
    return text


def _monday(value):
    if not isinstance(value, str) or not ISO_DATE.fullmatch(value):
        raise ValueError("must be a date in YYYY-MM-DD format")
    try:
        day = date.fromisoformat(value)
    except ValueError:
        raise ValueError("must be a real calendar date")
    if day.isoweekday() != 1:
        raise ValueError("must be the Monday that starts the week")
    return value


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def provided_fields(self):
        """Only the fields the client actually sent, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class UsageEntryCreate(RequestModel):
    week_start_date: str
    electricity_usage: NumberText = None
    electricity_unit: Optional[str] = None
    water_usage: NumberText = None
    water_unit: Optional[str] = None
    notes: Optional[str] = None

    check_week = field_validator("week_start_date")(_monday)
    check_usage = field_validator("electricity_usage", "water_usage")(_decimal_text)

    @field_validator("electricity_unit", "water_unit", "notes")
    @classmethod
    def blank_is_absent(cls, value):
        return value if value and value.strip() else None


class UsageEntryUpdate(RequestModel):
    week_start_date: Optional[str] = None
    electricity_usage: NumberText = None
    electricity_unit: Optional[str] = None
    water_usage: NumberText = None
    water_unit: Optional[str] = None
    notes: Optional[str] = None

    check_usage = field_validator("electricity_usage", "water_usage")(_decimal_text)

    @field_validator("week_start_date")
    @classmethod
    def check_week(cls, value):
        if value is None:
            raise ValueError("cannot be cleared")
        return _monday(value)

    @field_validator("electricity_unit", "water_unit")
    @classmethod
    def unit_required(cls, value):
        if not value or not value.strip():
            raise ValueError("cannot be empty")
        return value

    @field_validator("notes")
    @classmethod
    def blank_notes(cls, value):
        return value if value and value.strip() else None


class SettingsUpdate(RequestModel):
    electricity_limit: NumberText = None
    electricity_unit: Optional[str] = None
    water_limit: NumberText = None
    water_unit: Optional[str] = None
    weekly_alerts: Optional[StrictBool] = None
    threshold_alerts: Optional[StrictBool] = None
    saving_tips: Optional[StrictBool] = None

    @field_validator("electricity_limit", "water_limit")
    @classmethod
    def check_limit(cls, value):
        value = _decimal_text(value)
        if value is None:
            raise ValueError("is required")
        return value

    @field_validator("electricity_unit", "water_unit", "weekly_alerts",
                     "threshold_alerts", "saving_tips")
    @classmethod
    def not_null(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("cannot be empty")
        return value


class SettingsReplace(SettingsUpdate):
    """Full replacement: anything omitted falls back to the default value."""

    def provided_fields(self):
        values = dict(DEFAULT_SETTINGS)
        values.update(super().provided_fields())
        return values


def parse(model, payload, message="Invalid data"):
    if not isinstance(payload, dict):
        raise ValidationError(message, [{"field": None, "message": "Request body must be a JSON object"}])
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or None,
                "message": err["msg"]
            }
            for err in e.errors()
        ]
        raise ValidationError(message, errors)
