from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from loguru import logger

from tsmock.exceptions import MethodNotAllowed, RouteNotFound
from tsmock.models.domain_models import Entity
from tsmock.server.synthesizer import ValueSynthesizer

SynthesizerFactory = Callable[[], ValueSynthesizer]


def normalize_route_path(route: str) -> str:
    return route if route.startswith("/") else f"/{route}"


def resolve_routes(catalog: Sequence[Entity]) -> Dict[str, Entity]:
    """Map each distinct route path to the first entity declaring it."""
    routes: Dict[str, Entity] = {}
    for entity in catalog:
        path = normalize_route_path(entity.route)
        if path in routes:
            kept = routes[path]
            logger.warning(
                f"Duplicate route {path}: keeping {kept.name} from {kept.file_path}, "
                f"ignoring {entity.name} from {entity.file_path}"
            )
            continue
        routes[path] = entity
    return routes


class MockService:
    """Serves one GET endpoint per catalog route with freshly synthesized JSON."""

    def __init__(self, catalog: Sequence[Entity], synthesizer_factory: Optional[SynthesizerFactory] = None,
                 title: str = "tsmock"):
        self.catalog: Tuple[Entity, ...] = tuple(catalog)
        self.synthesizer_factory = synthesizer_factory or ValueSynthesizer
        self.routes = resolve_routes(self.catalog)
        self.app = self._create_app(title)

    def handle(self, route: str, method: str = "GET") -> Dict[str, Any]:
        """Synthesize the JSON body for ``route`` without going through HTTP."""
        if method.upper() != "GET":
            raise MethodNotAllowed(f"{method} is not supported, only GET")
        entity = self.routes.get(normalize_route_path(route))
        if entity is None:
            raise RouteNotFound(f"No mock registered for {route}")
        return self._synthesize(entity)

    def _synthesize(self, entity: Entity) -> Dict[str, Any]:
        return self.synthesizer_factory().synthesize_entity(entity)

    def _make_endpoint(self, entity: Entity) -> Callable[[], JSONResponse]:
        def endpoint() -> JSONResponse:
            return JSONResponse(self._synthesize(entity))
        return endpoint

    def _create_app(self, title: str) -> FastAPI:
        # Built-in docs are disabled so they cannot shadow mocked routes
        app = FastAPI(title=title, docs_url=None, redoc_url=None, openapi_url=None)
        for path, entity in self.routes.items():
            app.add_api_route(
                path,
                self._make_endpoint(entity),
                methods=["GET"],
                name=entity.name or path,
            )
            logger.info(f"Registered GET {path} ({len(entity.properties)} properties)")
        return app


def build_service(catalog: Sequence[Entity], synthesizer_factory: Optional[SynthesizerFactory] = None) -> MockService:
    return MockService(catalog, synthesizer_factory)
