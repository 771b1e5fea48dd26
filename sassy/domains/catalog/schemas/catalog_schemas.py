"""Catalog schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _clean_tags(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [v.strip() for v in values if v and v.strip()]


class ProductCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    brand: str = Field(min_length=1, max_length=120)
    category: str = Field(min_length=1, max_length=120)
    subcategory: Optional[str] = Field(default=None, max_length=120)
    image: Optional[str] = Field(default=None, max_length=1024)
    sizes: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    description: str = Field(default="", max_length=20000)
    featured: bool = False
    published: bool = True

    @field_validator("sizes", "concerns")
    @classmethod
    def strip_tags(cls, values):
        return _clean_tags(values)


class ProductUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    brand: Optional[str] = Field(default=None, min_length=1, max_length=120)
    category: Optional[str] = Field(default=None, min_length=1, max_length=120)
    subcategory: Optional[str] = Field(default=None, max_length=120)
    image: Optional[str] = Field(default=None, max_length=1024)
    sizes: Optional[List[str]] = None
    concerns: Optional[List[str]] = None
    description: Optional[str] = Field(default=None, max_length=20000)
    featured: Optional[bool] = None
    published: Optional[bool] = None

    @field_validator("sizes", "concerns")
    @classmethod
    def strip_tags(cls, values):
        return _clean_tags(values)


class ProductListFilter(BaseModel):
    category: Optional[str] = None
    brand: Optional[str] = None
    featured: Optional[bool] = None
    search: Optional[str] = None


class CatalogBrowseFilter(BaseModel):
    search: str = ""
    brands: List[str] = Field(default_factory=list)
    page: int = 1
