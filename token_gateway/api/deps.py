from fastapi import Request

from ..services.gateway import TokenGateway


def get_gateway(request: Request) -> TokenGateway:
    """Gateway built at startup and held on the application state."""
    return request.app.state.gateway
