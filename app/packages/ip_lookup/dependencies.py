"""FastAPI dependencies for the IP lookup route."""

from typing import Annotated

from fastapi import Depends, Request

from packages.ip_lookup.context import LookupContext


def get_lookup_context(request: Request) -> LookupContext:
    """Return the LookupContext built at startup and stored on app.state."""
    return request.app.state.lookup_context


LookupContextDep = Annotated[LookupContext, Depends(get_lookup_context)]
