from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from django.conf import settings
from django.urls import include, path
from django.views.decorators.csrf import csrf_exempt

from shared.infrastructure.graphql_view import NormalizedErrorGraphQLView

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules: versioned REST API
    path("api/v1/", include("modules.customers.urls")),
    # GraphQL (errors normalized, always HTTP 200)
    path(
        "graphql",
        csrf_exempt(NormalizedErrorGraphQLView.as_view(graphiql=settings.DEBUG)),
        name="graphql",
    ),
    # OpenAPI schema & docs (public)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
