# restaurant/utils/retry.py
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from restaurant.utils.settings import DB_CONNECT_ATTEMPTS


def db_retry(attempts: int | None = None):
    #ponawia tylko bledy polaczenia, bledy SQL ida od razu wyzej
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or DB_CONNECT_ATTEMPTS),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(OperationalError),
    )
