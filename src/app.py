import time
import uuid
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from core.config import Settings, setting
from core.utils import configure_logging, generate_transaction_id
from schema import TransferRequest, TransferResponse

TRANSFER_PATH = "/api/transfer"
TEXT_RESPONSE_BODY = "Transfer completed successfully."


def create_app(settings: Settings = setting) -> FastAPI:
    """Build the transfer service for the configured response mode."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Transfer Service",
        description="Simulated money transfer endpoint",
        version="1.0.0"
    )

    # Rate limiter setup, off unless RATE_LIMIT_ENABLED is set
    limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        started = time.time()
        request_id = request.state.request_id = str(uuid.uuid4())
        peer = request.client.host if request.client else "unknown"
        logger.info(f"Request {request_id}: {request.method} {request.url.path} from {peer}")

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(f"Error {request_id}: {exc}, Occurred after {time.time() - started:.3f}s")
            raise

        logger.info(
            f"Response {request_id}: Status {response.status_code}, "
            f"Completed in {time.time() - started:.3f}s"
        )
        response.headers["X-Request-ID"] = request_id
        return response

    if settings.response_mode == "text":
        @app.post(TRANSFER_PATH, response_class=PlainTextResponse)
        @limiter.limit(settings.RATE_LIMIT)
        async def transfer_text(request: Request):
            """Acknowledge a transfer without reading the request body"""
            request_id = getattr(request.state, "request_id", None)
            logger.info(f"Processing transfer: {request_id}")
            return TEXT_RESPONSE_BODY
    else:
        @app.post(TRANSFER_PATH, response_model=TransferResponse)
        @limiter.limit(settings.RATE_LIMIT)
        async def process_transfer(request: Request, transfer: TransferRequest | None = None):
            """Simulate a transfer between accounts; the request fields are never used"""
            request_id = getattr(request.state, "request_id", None)
            transaction_id = generate_transaction_id()
            logger.info(f"Processing transfer: {request_id}, Transaction ID: {transaction_id}")
            return TransferResponse(transaction_id=transaction_id)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host=setting.host, port=setting.port, reload=False)
