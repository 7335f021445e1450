from app.schemas.telecalling import (
    TelecallingCreate,
    TelecallingUpdate,
    TelecallingResponse,
    NextIdResponse,
    DeleteResponse,
    CounterResetResponse,
)

__all__ = [
    "TelecallingCreate",
    "TelecallingUpdate",
    "TelecallingResponse",
    "NextIdResponse",
    "DeleteResponse",
    "CounterResetResponse",
]
