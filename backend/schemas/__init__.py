# Schemas package
from .common import ErrorResponse, MessageResponse
from .health import HealthResponse
from .lines import LineCreate, LineResponse, LineUpdate, LineWithStops, LineWithVehicles
from .positions import PositionCreate, PositionResponse, PositionUpdate
from .stops import StopCreate, StopResponse, StopUpdate, StopWithLines
from .vehicles import VehicleCreate, VehicleResponse, VehicleUpdate

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LineCreate",
    "LineResponse",
    "LineUpdate",
    "LineWithStops",
    "LineWithVehicles",
    "MessageResponse",
    "PositionCreate",
    "PositionResponse",
    "PositionUpdate",
    "StopCreate",
    "StopResponse",
    "StopUpdate",
    "StopWithLines",
    "VehicleCreate",
    "VehicleResponse",
    "VehicleUpdate",
]
