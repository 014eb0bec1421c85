import functools
import logging
from app.domain.entities.result import Result
from app.domain.exceptions import CatalogError, StorageError


logger = logging.getLogger('handlers')


def result_handler(func):
    """
    A decorator that turns the outcome of an asynchronous catalog operation into a Result.

    A returned value becomes Result.ok. A CatalogError raised by the use cases becomes
    Result.err carrying the error class name and message, so no exception leaves the facade.
    Storage failures are logged with traceback, other rejections are already logged by the use cases.

    :param func: The asynchronous function to be wrapped.
    :return: The wrapped function returning a Result.
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return Result.success(await func(*args, **kwargs))
        except StorageError as e:
            logger.error(f"Error in {func.__name__}: {e.message}", exc_info=True)
            return Result.failure(e.kind, e.message)
        except CatalogError as e:
            return Result.failure(e.kind, e.message)
    return wrapper
