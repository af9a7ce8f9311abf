# Standard library imports
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.db.get_async_session import AsyncSessionLocal

ResultT = TypeVar("ResultT")


async def run_with_new_session(
    func: Callable[..., Awaitable[ResultT]],
    *args: Any,
    session_factory: Callable[[], AsyncSession] | None = None,
    **kwargs: Any,
) -> ResultT:
    """
    Run a service function outside a request, with its own DB session.

    Used by the maintenance scripts, which call the same services as the API.

    Args:
        func: The function to run; it receives the AsyncSession as first argument.
        *args: Positional arguments to pass to the function.
        session_factory: Session factory to use instead of the application one.
        **kwargs: Keyword arguments to pass to the function.

    Returns:
        The result of the function execution.
    """
    factory = session_factory or AsyncSessionLocal
    async with factory() as session:
        return await func(session, *args, **kwargs)
