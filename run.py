import sys
import uvicorn
import logging
from sqlalchemy.exc import SQLAlchemyError
from app import create_app
from app.core.config import ConfigurationError, Settings, configure_logging, load_environment

load_environment()
configure_logging()

settings = Settings()

try:
    app = create_app(settings)
except (ConfigurationError, SQLAlchemyError) as e:
    logging.critical(f"Database link failure: {e}")
    sys.exit(1)

if __name__ == "__main__":
    # Start the FastAPI server
    logging.info(f"Server starting at http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
