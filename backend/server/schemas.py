from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from core.move import Coordinate


class CoordinateModel(BaseModel):
    """Square as a human types it: 1-indexed row then column.

    Range checks are left to the engine so that an off-board chain
    destination can end the chain.
    """

    row: int
    col: int

    def to_position(self) -> Coordinate:
        return (self.row - 1, self.col - 1)


class MoveRequest(BaseModel):
    start: CoordinateModel
    end: CoordinateModel


class ChainStepRequest(BaseModel):
    destination: Optional[CoordinateModel] = Field(
        default=None, description="Landing square for the next jump; omit or null to decline."
    )


class ResetRequest(BaseModel):
    edgeChainGuard: Optional[bool] = None
