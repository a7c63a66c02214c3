import functools
import logging

logger = logging.getLogger(__name__)


def demote_to_miss(stage: str):
    """
    Wrap an async generation stage so that any exception it raises is logged
    and turned into a miss (None), letting the caller fall through to the
    next stage.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Stage '{stage}' failed in {func.__name__}, treating as a miss: {e}", exc_info=True)
                return None
        return wrapper
    return decorator
