import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request

from .api.router import api_router
from .core.abi import load_contract_abi
from .core.config import Settings, settings
from .services.chain_client import ChainClient
from .services.codec import ContractCodec
from .services.gateway import TokenGateway

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def build_gateway(config: Settings) -> TokenGateway:
    """
    Connect to the node and parse the contract interface.
    Raises if either cannot be established; the service must not start without them.
    """
    abi = load_contract_abi(config.ABI_PATH)
    codec = ContractCodec(abi)

    client = ChainClient(
        config.RPC_URL,
        timeout=config.RPC_TIMEOUT,
        block_identifier=config.BLOCK_IDENTIFIER,
    )
    if not client.is_connected():
        raise ConnectionError(f"Could not connect to {config.RPC_URL}")
    logger.info(f"Connected to node at {config.RPC_URL}")

    return TokenGateway(codec, client, config.TOKEN_ADDRESS)


def create_app(gateway: Optional[TokenGateway] = None, config: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logger.info("Starting token gateway API service...")
        if gateway is None:
            app.state.gateway = build_gateway(config)
        else:
            app.state.gateway = gateway
        logger.info(f"Serving token contract {app.state.gateway.contract_address}")

        yield

        logger.info("Shutting down token gateway API service...")

    app = FastAPI(
        title=config.PROJECT_NAME,
        description="Read-only API for an ERC-20 token contract",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix=config.API_PREFIX)

    @app.get("/test")
    def test_endpoint():
        """Test endpoint to verify service is running."""
        return {
            "service": "token-gateway",
            "status": "ok",
            "message": "hello from token gateway service",
        }

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint that verifies the node connection."""
        if not request.app.state.gateway.client.is_connected():
            raise HTTPException(status_code=503, detail="Node connection failed")

        return {
            "status": "healthy",
            "node": "connected",
            "contract": request.app.state.gateway.contract_address,
        }

    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
