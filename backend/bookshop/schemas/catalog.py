"""Catalog Reference Schemas — publishers, age categories, authors, genres."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _StrippedModel(BaseModel):
    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class PublisherCreate(_StrippedModel):
    name: str = Field(min_length=1, max_length=200)
    address: str = Field("", max_length=2000)
    email: str = Field(min_length=3, max_length=200)
    phone: str = Field(min_length=1, max_length=50)


class PublisherView(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    address: str
    email: str
    phone: str


class AgeCategoryCreate(_StrippedModel):
    tag: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1)
    minimum_age: int = Field(ge=0, le=100)


class AgeCategoryView(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    tag: str
    description: str
    minimum_age: int


class AuthorCreate(_StrippedModel):
    name: str = Field(min_length=1, max_length=100)
    surname: str = Field(min_length=1, max_length=100)
    date_of_birth: date
    pseudonym: str | None = Field(None, max_length=100)


class AuthorView(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    surname: str
    date_of_birth: date
    pseudonym: str | None


class GenreCreate(_StrippedModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""


class GenreView(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: str
