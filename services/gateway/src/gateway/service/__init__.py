from gateway.service.gateway_service import GatewayService, RelayResult

__all__ = ["GatewayService", "RelayResult"]
