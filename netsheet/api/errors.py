"""Mapping from engine errors to HTTP errors shared by the routers."""

from fastapi import HTTPException

from netsheet.errors import ErrorKind, MortgageEngineError


def engine_error(e: MortgageEngineError) -> HTTPException:
    status = 404 if e.kind is ErrorKind.UNKNOWN_STATE else 400
    return HTTPException(status_code=status, detail={"kind": e.kind.value, "message": e.message})
