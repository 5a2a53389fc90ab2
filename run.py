
import logging
from ticketdesk.app.config import settings
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
from ticketdesk.app.server import create_app

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn
    logging.info(f"Ticket API Server running at http://localhost:{settings.port}")
    logging.info(f"Swagger Docs available at http://localhost:{settings.port}{settings.docs_url}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
