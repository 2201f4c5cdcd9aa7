from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _year_to_str(v):
    # the front-end sends the year both as a number and as a string
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(int(v))
    return v


class MemberInput(BaseModel):
    """
    Body used when creating a member. Fields not listed here are dropped
    before the document is stored.
    """
    model_config = ConfigDict(extra='ignore')

    name: Optional[str] = None
    role: Optional[str] = None
    company: Optional[str] = None
    year: Optional[str] = None
    linkedInUrl: Optional[str] = None
    imageUrl: Optional[str] = None

    @field_validator("year", mode="before")
    @classmethod
    def year_validator(cls, v):
        return _year_to_str(v)


class MemberUpdate(MemberInput):
    id: Optional[str] = None


class MemberDelete(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = None


class Member(BaseModel):
    id: str = Field(validation_alias=AliasChoices('_id', 'id'))
    name: Optional[str] = None
    role: Optional[str] = None
    company: str = ''
    year: Optional[str] = None
    linkedInUrl: str = ''
    imageUrl: str = ''

    # ObjectId from the database is exposed as its hex string
    @field_validator("id", mode="before")
    @classmethod
    def id_validator(cls, v):
        return str(v)

    # empty and missing optional strings are both rendered as ""
    @field_validator("company", "linkedInUrl", "imageUrl", mode="before")
    @classmethod
    def empty_string_validator(cls, v):
        return v or ''

    @field_validator("year", mode="before")
    @classmethod
    def year_validator(cls, v):
        return _year_to_str(v)
