from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from annoquery.api.middleware import request_logging_middleware
from annoquery.api.schemas import FacetedQueryResponse, FlatQueryResponse, HealthResponse, TokensResponse
from annoquery.common.config import settings
from annoquery.query.facets import FocusFilter, facets_to_dict, generate_faceted_filter
from annoquery.query.flat import to_object
from annoquery.query.tokenizer import tokenize

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Annotation Query Parser", version="1.0.0")

    app.middleware("http")(request_logging_middleware)

    max_len = settings.max_query_length

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/query/tokens", response_model=TokensResponse)
    def query_tokens(q: str = Query("", max_length=max_len)) -> TokensResponse:
        return TokensResponse(query=q, tokens=tokenize(q))

    @app.get("/query/flat", response_model=FlatQueryResponse)
    def query_flat(q: str = Query("", max_length=max_len)) -> FlatQueryResponse:
        fields = to_object(q)
        log.debug("flat_query", extra={"token_count": sum(len(v) for v in fields.values())})
        return FlatQueryResponse(query=q, fields=fields)

    @app.get("/query/facets", response_model=FacetedQueryResponse)
    def query_facets(
        q: str = Query("", max_length=max_len),
        user: Optional[str] = Query(None, description="Focused user, merged ahead of user: terms"),
    ) -> FacetedQueryResponse:
        facets = generate_faceted_filter(q, FocusFilter(user=user))
        return FacetedQueryResponse(query=q, user=user, facets=facets_to_dict(facets))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(_, exc: Exception):
        log.exception("unhandled_exception", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "internal_server_error"})

    return app
