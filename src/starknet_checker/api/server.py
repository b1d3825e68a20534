import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from starknet_checker.api.routes import router
from starknet_checker.core.models import DEFAULT_RPC_URL
from starknet_checker.core.node import StarknetNode


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load configuration
    rpc_url = os.getenv("STARKNET_RPC_URL", DEFAULT_RPC_URL)
    timeout = float(os.getenv("STARKNET_RPC_TIMEOUT", "15"))

    # Attach to app state
    app.state.node = StarknetNode(rpc_url=rpc_url, timeout=timeout)

    yield
    app.state.node.close()


app = FastAPI(
    title="Starknet Address Checker API",
    description="Validate Starknet addresses and check for deployed contracts",
    version="0.1.0",
    lifespan=lifespan,
)

# Allow CORS for easy frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok"}
