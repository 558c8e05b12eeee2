import dataclasses
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.config import get_settings
from src.errors import InvalidReceiptError, ReceiptProcessorError
from src.model.ResponseModel import PointsResponse, ReceiptIdResponse
from src.observability import setup_logging
from src.schema.ReceiptSchema import ReceiptSchema
from src.service.processor import ReceiptProcessor

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to the Receipt Processor API! Use /receipts/process to submit a receipt "
    "and /receipts/{id}/points to get points."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Receipt processor listening on http://%s:%s", settings.host, settings.port)
    yield


def get_processor(request: Request) -> ReceiptProcessor:
    return request.app.state.processor


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(ReceiptProcessorError)
    async def receipt_error_handler(request: Request, exc: ReceiptProcessorError):
        logger.warning(exc.message, extra={"error_code": exc.code, "path": request.url.path})
        return JSONResponse(status_code=exc.http_status, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # undecodable JSON and wrongly typed fields both land here
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors(),
                       extra={"error_code": InvalidReceiptError.code, "path": request.url.path})
        error = InvalidReceiptError()
        return JSONResponse(status_code=error.http_status, content={"detail": error.message})


def create_app(processor: Optional[ReceiptProcessor] = None) -> FastAPI:
    app = FastAPI(title="Receipt Processor", lifespan=lifespan)
    app.state.processor = processor if processor is not None else ReceiptProcessor()
    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return WELCOME_MESSAGE

    @app.get("/health")
    def health(processor: ReceiptProcessor = Depends(get_processor)):
        return {"status": "healthy", "receipts": len(processor.store)}

    @app.post("/receipts/process")
    def process_receipt(payload: ReceiptSchema, processor: ReceiptProcessor = Depends(get_processor)):
        receipt_id = processor.submit(payload)
        return JSONResponse(content=dataclasses.asdict(ReceiptIdResponse(id=receipt_id)))

    # path convertor so an empty id still reaches validation
    @app.get("/receipts/{receipt_id:path}/points")
    def get_points(receipt_id: str, processor: ReceiptProcessor = Depends(get_processor)):
        points = processor.points(receipt_id)
        return JSONResponse(content=dataclasses.asdict(PointsResponse(points=points)))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run("src.app:app", host=settings.host, port=settings.port, reload=settings.reload)
