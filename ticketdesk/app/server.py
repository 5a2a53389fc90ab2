import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from ..connectors.tickets_router import TicketHandlerUnavailable, handler_unavailable, router as tickets_router
from ..handlers.tickets import TicketHandler
from ..storage.repository import TicketRepository

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Construye la app: inicializa el repositorio y monta las rutas.

    El repositorio se inicializa aquí (arranque del proceso); si el archivo ya
    existe no se toca.
    """
    settings = settings or default_settings
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="API to create and manage tickets",
        docs_url=settings.docs_url,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repo = TicketRepository(settings.tickets_path)
    # un fallo aquí (TicketStoreError) aborta el arranque
    repo.initialize()
    app.state.ticket_handler = TicketHandler(repo)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(req: Request, exc: RequestValidationError):
        # cuerpo no JSON o con tipos incorrectos: error de cliente, mismo formato {error}
        logger.info(f"Invalid request body on {req.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.get("/health", summary="Health check")
    def health():
        status_code, content = TicketHandler.health()
        return JSONResponse(status_code=status_code, content=content)

    app.add_exception_handler(TicketHandlerUnavailable, handler_unavailable)
    app.include_router(tickets_router)
    return app
