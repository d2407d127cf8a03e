import uvicorn

from app.config import get_settings
from app.main import app, logger


def main():
    settings = get_settings()
    logger.info("Server running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
