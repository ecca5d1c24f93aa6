"""GraphQL HTTP endpoint with error normalization."""

from __future__ import annotations

import structlog
from graphene_django.views import GraphQLView
from graphql import ExecutionResult

from shared.infrastructure.graphql_errors import normalize

logger = structlog.get_logger(__name__)


class NormalizedErrorGraphQLView(GraphQLView):
    """``GraphQLView`` that normalizes execution errors before rendering.

    Failures are reported inside the ``errors`` array, so the transport
    status stays 200 even for errors graphene-django would otherwise answer
    with a 400 (variable coercion, document validation).
    """

    def execute_graphql_request(self, *args, **kwargs):
        result = super().execute_graphql_request(*args, **kwargs)
        if result is None or not result.errors:
            return result
        return ExecutionResult(
            data=result.data,
            errors=normalize(result.errors),
            extensions=result.extensions,
        )

    def get_response(self, request, data, show_graphiql=False):
        result, status_code = super().get_response(request, data, show_graphiql)
        if status_code == 400:
            logger.info("graphql.errors_reported_in_body", engine_status_code=400)
            status_code = 200
        return result, status_code
