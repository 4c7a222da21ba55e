"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from upi_gateway.api.dependencies import get_gateway_config
from upi_gateway.api.endpoints.payments import payments_api
from upi_gateway.error_handler import ErrorHandler, PaymentError
from upi_gateway.utils.config_loader import GatewayConfig

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="UPI Gateway Proxy",
    description="Forwards UPI collect and payout requests to the Razorpay / RazorpayX API",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

error_handler = ErrorHandler()

# Register payments router (paths are fixed: /upi/*, /create/*)
app.include_router(payments_api)


@app.exception_handler(PaymentError)
async def payment_error_handler(request: Request, exc: PaymentError):
    status_code, body = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Routing errors (404, 405) share the {"error": ...} body shape.
    logger.info("HTTP %s on %s %s", exc.status_code, request.method, request.url.path)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    status_code, body = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=status_code, content=body)


@app.get("/health", tags=["Health"])
async def health_check(config: GatewayConfig = Depends(get_gateway_config)):
    return {"status": "healthy", "sandbox_mode": config.sandbox_mode, "timestamp": datetime.now().isoformat()}
