import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dynaqs.error import DynaQSException

from . import config


def setup_error_handler(app: FastAPI) -> FastAPI:
    DEVELOPER_MODE = config.DEVELOPER_MODE

    @app.exception_handler(DynaQSException)
    async def dynaqs_exception_handler(request: Request, exc: DynaQSException):
        content = exc.content

        if DEVELOPER_MODE:
            content['traceback'] = traceback.format_exc()

        return JSONResponse(
            status_code=exc.status_code,
            content=content
        )

    return app
