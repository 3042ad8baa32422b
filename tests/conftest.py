"""
Test configuration for stable local/CI execution.
"""
from __future__ import annotations

import asyncio
import inspect
import os


os.environ.setdefault("ENVIRONMENT", "test")


def pytest_pyfunc_call(pyfuncitem):
    """
    Minimal asyncio runner to support async test functions without extra plugins.
    """
    testfunction = pyfuncitem.obj
    if not inspect.iscoroutinefunction(testfunction):
        return None

    kwargs = {
        argname: pyfuncitem.funcargs[argname]
        for argname in pyfuncitem._fixtureinfo.argnames
    }
    asyncio.run(testfunction(**kwargs))
    return True
