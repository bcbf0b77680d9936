from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ...api import ApiFunction, ApiState, call_api, get_api_functions
from ...domain import EmptyTitleError, InvalidCategoryError, InvalidDateError, NotFoundError

logger = logging.getLogger(__name__)

_VALIDATION_ERRORS = (EmptyTitleError, InvalidCategoryError, InvalidDateError, TypeError)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ApiCallResponse(BaseModel):
    name: str
    result: Any = None


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "parameters": api_function.parameter_schema,
    }


def create_app(state: Optional[ApiState] = None) -> FastAPI:
    """Build the HTTP app around ``state``; a fresh, empty schedule when omitted."""

    api_state = state or ApiState()
    app_name = api_state.context.settings.ui.app_name
    app = FastAPI(title=f"{app_name} Local API", version="0.1.0")
    app.state.api = api_state

    @app.get("/api/functions")
    async def list_api_functions() -> Dict[str, Any]:
        return {"functions": [_serialize_api_function(func) for func in get_api_functions()]}

    @app.post("/api/functions/{function_name}", response_model=ApiCallResponse)
    def invoke_api_function(function_name: str, request: ApiCallRequest) -> ApiCallResponse:
        try:
            result = call_api(api_state, function_name, **request.arguments)
        except KeyError as exc:
            logger.warning("API function not found: %s", function_name)
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except _VALIDATION_ERRORS as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except Exception as exc:  # noqa: BLE001
            logger.exception("API function %s failed", function_name)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        logger.debug("API function %s executed successfully", function_name)
        return ApiCallResponse(name=function_name, result=result)

    return app


def run_local_server(host: str = "127.0.0.1", port: int = 8000, *, state: Optional[ApiState] = None) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Calm Calendar API on %s:%d", host, port)
    asyncio.run(serve(create_app(state), config))
