"""
Wrapper around creating a parallel function call
"""
from typing import Any, Callable, Iterable, List

import gevent.pool


def parallel_call(
    function: Callable[[Any], Any], args: Iterable[Any], pool_size: int = 10
) -> List[Any]:
    """
    Execute a function in parallel
    :param function: Function to execute
    :param args: Args to pass to the function, one call per entry
    :param pool_size: How large the gevent pool should be
    :return: Results from execution, in the order of args
    """
    pool = gevent.pool.Pool(pool_size)
    return list(pool.map(function, args))
