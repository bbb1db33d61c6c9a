import uvicorn

from infrastructure.services import get_settings
from server import server

server_app = server.handler


def main() -> None:
    """Serve the application; failing to bind the port is the only fatal error."""
    settings = get_settings()
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
