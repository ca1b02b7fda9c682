# restaurant/main.py
import uvicorn

from restaurant.api import create_app
from restaurant.utils.settings import HOST, PORT
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info(f"Starting Restaurant Ordering API on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
