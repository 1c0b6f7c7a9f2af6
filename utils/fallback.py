from typing import TypeVar, Callable, Tuple, Type
from functools import wraps

from utils.logger import setup_logger

logger = setup_logger(__name__)

T = TypeVar('T')


def with_fallback(
    fallback_func: Callable[..., T],
    exception_types: Tuple[Type[BaseException], ...] = (Exception,),
    passthrough: Tuple[Type[BaseException], ...] = (),
    log_errors: bool = True
) -> Callable:
    """Run the wrapped callable and return ``fallback_func(*args, **kwargs)`` when it raises.

    Exceptions listed in ``passthrough`` are re-raised untouched so callers can still
    surface request-shape errors.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except passthrough:
                raise
            except exception_types as e:
                if log_errors:
                    logger.error(
                        f"Function {func.__name__} failed, using fallback",
                        extra={
                            "function": func.__name__,
                            "error": str(e),
                            "error_type": type(e).__name__,
                            "fallback": fallback_func.__name__
                        },
                        exc_info=True
                    )
                return fallback_func(*args, **kwargs)
        return wrapper
    return decorator
