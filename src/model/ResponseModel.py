from dataclasses import dataclass


@dataclass
class ReceiptIdResponse:
    id: str


@dataclass
class PointsResponse:
    points: int
