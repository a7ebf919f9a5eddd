from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"


class TokensResponse(BaseModel):
    query: str
    tokens: list[str]


class FlatQueryResponse(BaseModel):
    query: str
    fields: dict[str, list[str]]


class FacetModel(BaseModel):
    operator: Literal["and", "or"]
    terms: list[Union[int, str]] = Field(default_factory=list)


class FacetedQueryResponse(BaseModel):
    query: str
    user: str | None = None
    facets: dict[str, FacetModel]
